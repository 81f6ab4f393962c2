# lc3_core/core/cpu.py
"""
Core Layer (抽象CPU)

このモジュールは、CPUの基本的な状態管理と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from lc3_core.common.errors import Lc3Error
from lc3_core.core.snapshot import Operation
from lc3_core.core.state import CpuState
from lc3_core.transport.bus import Bus

logger = logging.getLogger(__name__)


# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    全てのCPUエミュレーションの基底となる抽象クラス。
    Busとのインターフェース、実行状態（RUNNING/HALTED）、命令サイクルの抽象化を提供します。
    """
    # @intent:pre-condition `bus`は有効なBusオブジェクトである必要があります。
    def __init__(self, bus: Bus):
        self._bus = bus
        self._state: CpuState = self._create_initial_state()
        self._running: bool = True
        self._instruction_count: int = 0

    # @intent:rationale 各CPUアーキテクチャで初期状態が異なるため、抽象メソッドとして定義します。
    @abstractmethod
    def _create_initial_state(self) -> CpuState:
        pass

    # @intent:responsibility CPUを初期状態に戻し、実行可能状態にします。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._running = True
        self._instruction_count = 0

    def get_state(self) -> CpuState:
        """
        現在のCPUの状態（レジスタ値など）を返します。
        """
        return self._state

    @property
    def bus(self) -> Bus:
        return self._bus

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def instruction_count(self) -> int:
        return self._instruction_count

    # @intent:responsibility CPUを停止状態（HALTED）へ遷移させます。
    def halt(self) -> None:
        self._running = False

    @abstractmethod
    def _fetch(self) -> int:
        """
        現在のPCから命令語をフェッチして返します。
        """
        pass

    @abstractmethod
    def _decode(self, instruction: int) -> Operation:
        pass

    @abstractmethod
    def _execute(self, operation: Operation) -> None:
        pass

    # @intent:responsibility CPUを1命令サイクル進め、実行した命令を返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（フェッチ→PC更新→デコード→実行）を定義します。
    def step(self) -> Optional[Operation]:
        """
        1命令を実行し、そのOperationを返します。
        停止状態の場合は何も実行せずNoneを返します。
        """
        if not self._running:
            return None

        instruction = self._fetch()
        self._update_pc()
        operation = self._decode(instruction)
        self._execute(operation)
        self._instruction_count += 1
        return operation

    # @intent:responsibility フェッチ直後のPC更新。デフォルトはデコード前に1ワード進めます。
    def _update_pc(self) -> None:
        self._state.increment_pc()

    # @intent:responsibility 停止状態になるまで命令サイクルを繰り返します。
    # @intent:post-condition 致命的なエラーが発生した場合、CPUを停止状態にしてから例外を再送出します。
    def run(self) -> None:
        """
        HALTされるまで命令を実行し続けます。
        """
        logger.info("Run started at PC %#06x", self._state.pc)
        try:
            while self._running:
                self.step()
        except Lc3Error:
            self._running = False
            logger.error(
                "Execution aborted at PC %#06x after %d instructions",
                self._state.pc, self._instruction_count,
            )
            raise
        logger.info("Machine halted after %d instructions", self._instruction_count)

    # @intent:responsibility 停止状態のCPUを再び実行可能にし、実行を継続します。
    def resume(self) -> None:
        self._running = True
        self.run()
