# lc3_core/arch/lc3/cpu.py
"""
LC-3 CPUエミュレーションの中心モジュール。
"""
import logging
from typing import BinaryIO, Optional

from lc3_core.arch.lc3.instructions import decode_instruction, execute_instruction
from lc3_core.arch.lc3.opcodes import Opcode, TrapVector
from lc3_core.arch.lc3.state import Lc3CpuState
from lc3_core.arch.lc3.traps import TrapDispatcher
from lc3_core.common.types import Word
from lc3_core.core.cpu import AbstractCpu
from lc3_core.core.snapshot import Operation, Snapshot
from lc3_core.loader.loader import ObjectImageLoader
from lc3_core.transport.bus import Bus
from lc3_core.transport.console import Console

logger = logging.getLogger(__name__)


# @intent:responsibility LC-3 CPUの具体的なエミュレーションロジック（フェッチ、デコード、実行）を提供します。
class Lc3Cpu(AbstractCpu):
    """
    LC-3 CPUをエミュレートするクラス。

    メモリ（Bus）とコンソールを専有し、他のインスタンスと状態を共有しません。
    """
    def __init__(self, bus: Bus, traps: Optional[TrapDispatcher] = None):
        super().__init__(bus)
        self._traps = traps if traps is not None else TrapDispatcher(bus.console)

    # @intent:responsibility コンソールを指定して、新しいバスを持つCPUを生成します。
    @classmethod
    def create(cls, console: Console, **trap_options) -> 'Lc3Cpu':
        return cls(Bus(console), TrapDispatcher(console, **trap_options))

    # @intent:responsibility スナップショットから独立したCPUを再構築します。
    # @intent:post-condition 復元されたCPUは停止状態であり、実行再開には resume() の呼び出しが必要です。
    @classmethod
    def from_snapshot(cls, snapshot: Snapshot, console: Console, **trap_options) -> 'Lc3Cpu':
        cpu = cls.create(console, **trap_options)
        cpu._bus.restore(snapshot.memory)
        cpu._state = snapshot.state.copy()
        cpu._running = False
        return cpu

    def _create_initial_state(self) -> Lc3CpuState:
        return Lc3CpuState()

    def _fetch(self) -> int:
        return self._bus.read(self._state.pc)

    def _decode(self, instruction: int) -> Operation:
        # PCはフェッチ後に既に進められているため、命令のアドレスは1つ前
        return decode_instruction(instruction, (self._state.pc - 1) & 0xFFFF)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self._state, self._bus)
        if operation.opcode is Opcode.TRAP:
            vector = TrapVector.from_instruction(operation.instruction, operation.address)
            if self._traps.dispatch(vector, self._state, self._bus):
                self.halt()

    # @intent:responsibility メモリとレジスタのディープコピーを取得します。
    def snapshot(self) -> Snapshot:
        return Snapshot(state=self._state.copy(), memory=self._bus.dump())

    # @intent:responsibility MMIOの副作用付きでメモリを読み出します。
    # @intent:rationale キーボードデバイスはメインループ外からもポーリングされ得るため公開しています。
    def read_memory(self, address: int) -> Word:
        return self._bus.read(address)

    # @intent:responsibility バイトストリームからオブジェクトイメージをメモリに読み込みます。
    def load(self, stream: BinaryIO) -> int:
        return ObjectImageLoader().load(stream, self._bus)

    def load_file(self, path: str) -> int:
        return ObjectImageLoader().load_file(path, self._bus)
