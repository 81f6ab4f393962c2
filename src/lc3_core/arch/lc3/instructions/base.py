# lc3_core/arch/lc3/instructions/base.py
"""
LC-3命令実装用の共通ユーティリティ。
"""
from lc3_core.common.bits import bit_field, sign_extend
from lc3_core.common.types import Word


# @intent:utility_function 命令語のビット[11:9]（DR / SR / nzp）を取り出します。
def field_11_9(instruction: Word) -> int:
    return bit_field(instruction, 9, 3)


# @intent:utility_function 命令語のビット[8:6]（SR1 / BaseR）を取り出します。
def field_8_6(instruction: Word) -> int:
    return bit_field(instruction, 6, 3)


# @intent:utility_function 命令語のビット[2:0]（SR2）を取り出します。
def field_2_0(instruction: Word) -> int:
    return bit_field(instruction, 0, 3)


def imm5(instruction: Word) -> Word:
    return sign_extend(bit_field(instruction, 0, 5), 5)


def offset6(instruction: Word) -> Word:
    return sign_extend(bit_field(instruction, 0, 6), 6)


def pc_offset9(instruction: Word) -> Word:
    return sign_extend(bit_field(instruction, 0, 9), 9)


def pc_offset11(instruction: Word) -> Word:
    return sign_extend(bit_field(instruction, 0, 11), 11)
