# lc3_core/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CPUの基本的な状態を保持するデータ構造を定義します。
"""
from dataclasses import dataclass

from lc3_core.common.types import PC_START, WORD_MASK


# @intent:responsibility CPUのレジスタ状態を保持します。アーキテクチャ固有のレジスタはこれを拡張します。
@dataclass
class CpuState:
    """
    CPUのレジスタ状態を保持するデータクラス。
    """
    pc: int = PC_START  # Program Counter

    # @intent:responsibility PCを1ワード進めます（16bitでラップアラウンド）。
    def increment_pc(self) -> None:
        self.pc = (self.pc + 1) & WORD_MASK
