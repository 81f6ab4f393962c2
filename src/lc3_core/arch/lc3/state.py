# lc3_core/arch/lc3/state.py
"""
LC-3 CPU固有の状態定義。
"""
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import List

from lc3_core.common.bits import is_negative
from lc3_core.common.types import NUM_REGISTERS, RegisterIndex, Word, WORD_MASK
from lc3_core.core.state import CpuState


# @intent:constant 条件フラグ。値はBR命令のnzpフィールドと直接ANDできるビット位置に対応します。
class ConditionFlag(IntEnum):
    POS = 1 << 0  # P
    ZRO = 1 << 1  # Z
    NEG = 1 << 2  # N


# @intent:responsibility LC-3の汎用レジスタ（R0-R7）、PC、条件フラグの状態を保持します。
# @intent:rationale 汎用レジスタは名前付きフィールドではなく固定長のリストで保持し、インデックスでアクセスします。
@dataclass
class Lc3CpuState(CpuState):
    """
    LC-3 CPUのレジスタ状態を保持するデータクラス。
    """
    registers: List[Word] = field(default_factory=lambda: [0] * NUM_REGISTERS)
    cond: ConditionFlag = ConditionFlag.ZRO

    # @intent:pre-condition indexは0-7である必要があります。範囲外は不変条件違反です。
    def get_register(self, index: RegisterIndex) -> Word:
        if not 0 <= index < NUM_REGISTERS:
            raise IndexError(f"Register index {index} out of range.")
        return self.registers[index]

    def set_register(self, index: RegisterIndex, value: Word) -> None:
        if not 0 <= index < NUM_REGISTERS:
            raise IndexError(f"Register index {index} out of range.")
        self.registers[index] = value & WORD_MASK

    # @intent:responsibility 指定レジスタの現在値から条件フラグを再計算します。
    def set_cc(self, index: RegisterIndex) -> None:
        value = self.get_register(index)
        if value == 0:
            self.cond = ConditionFlag.ZRO
        elif is_negative(value, 16):
            self.cond = ConditionFlag.NEG
        else:
            self.cond = ConditionFlag.POS

    @property
    def flag_n(self) -> bool:
        return self.cond is ConditionFlag.NEG

    @property
    def flag_z(self) -> bool:
        return self.cond is ConditionFlag.ZRO

    @property
    def flag_p(self) -> bool:
        return self.cond is ConditionFlag.POS

    # @intent:responsibility 独立したディープコピーを返します。
    def copy(self) -> 'Lc3CpuState':
        return replace(self, registers=list(self.registers))
