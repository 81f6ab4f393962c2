# lc3_core/arch/lc3/opcodes.py
"""
LC-3のオペコードとトラップベクタの定義。

どちらも閉じた列挙型であり、生のビットパターンからの構築は失敗し得る操作として扱います。
"""
from enum import IntEnum

from lc3_core.common.errors import UnimplementedOpcodeError, UnknownTrapVectorError


# @intent:constant 命令語の上位4bitで選択されるオペコード。
class Opcode(IntEnum):
    BR = 0    # branch
    ADD = 1   # add
    LD = 2    # load
    ST = 3    # store
    JSR = 4   # jump register
    AND = 5   # bitwise and
    LDR = 6   # load register
    STR = 7   # store register
    RTI = 8   # unused
    NOT = 9   # bitwise not
    LDI = 10  # load indirect
    STI = 11  # store indirect
    JMP = 12  # jump
    RES = 13  # reserved (unused)
    LEA = 14  # load effective address
    TRAP = 15  # execute trap

    # @intent:responsibility 実装済みのオペコードかどうかを返します。
    @property
    def is_implemented(self) -> bool:
        return self not in (Opcode.RTI, Opcode.RES)

    # @intent:responsibility 命令語からオペコードを取り出します。
    # @intent:post-condition RTIまたは予約オペコードの場合はUnimplementedOpcodeErrorを送出します。
    @classmethod
    def from_instruction(cls, instruction: int, address=None) -> 'Opcode':
        opcode = cls((instruction >> 12) & 0xF)
        if not opcode.is_implemented:
            where = f" at {address:#06x}" if address is not None else ""
            raise UnimplementedOpcodeError(
                f"Opcode {opcode.name} ({instruction:#06x}){where} is not implemented.",
                instruction, address,
            )
        return opcode


# @intent:constant TRAP命令の下位8bitで選択されるトラップベクタ。
class TrapVector(IntEnum):
    GETC = 0x20   # get character from keyboard, not echoed
    OUT = 0x21    # output a character
    PUTS = 0x22   # output a word string
    IN = 0x23     # get character from keyboard, echoed
    PUTSP = 0x24  # output a byte string
    HALT = 0x25   # halt the program

    @classmethod
    def from_instruction(cls, instruction: int, address=None) -> 'TrapVector':
        code = instruction & 0xFF
        try:
            return cls(code)
        except ValueError:
            where = f" at {address:#06x}" if address is not None else ""
            raise UnknownTrapVectorError(
                f"Unsupported trap vector {code:#04x}{where}.", instruction, address
            ) from None
