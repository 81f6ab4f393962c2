# lc3_core/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、デコード済み命令の記録と、メモリとレジスタの完全な状態を記録した
不変のデータ構造を定義します。
"""
from array import array
from dataclasses import dataclass
from enum import IntEnum

from lc3_core.core.state import CpuState


# @intent:responsibility デコードされた命令の詳細を記録します。
@dataclass(frozen=True)
class Operation:
    """
    フェッチ・デコードされた1命令を表すデータクラス。
    """
    address: int  # 命令がフェッチされたアドレス
    instruction: int  # 生の16bit命令語
    opcode: IntEnum

    @property
    def mnemonic(self) -> str:
        return self.opcode.name


# @intent:responsibility ある一時点におけるメモリとレジスタの完全な状態を不変に記録します。
@dataclass(frozen=True)
class Snapshot:
    """
    メモリ内容とCPU状態のディープコピー。
    同一の開始状態から繰り返し試行を行うために使用します。
    """
    state: CpuState
    # @intent:rationale frozen=Trueはフィールドへの再代入を防ぐのみで、arrayの中身の変更は防ぎません。
    #                  復元時には必ずコピーを作成するため、スナップショット自体は何度でも再利用できます。
    memory: array
