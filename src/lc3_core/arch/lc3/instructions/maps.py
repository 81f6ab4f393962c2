# lc3_core/arch/lc3/instructions/maps.py
"""
オペコードと命令実装のマッピング定義。
"""
from lc3_core.arch.lc3.opcodes import Opcode
from . import alu
from . import control
from . import load

# @intent:map オペコードから実行関数へのマッピングテーブル。RTIとRESは意図的に含みません。
EXECUTE_MAP = {
    # ALU
    Opcode.ADD: alu.execute_add,
    Opcode.AND: alu.execute_and,
    Opcode.NOT: alu.execute_not,

    # Load/Store
    Opcode.LD: load.execute_ld,
    Opcode.LDI: load.execute_ldi,
    Opcode.LDR: load.execute_ldr,
    Opcode.LEA: load.execute_lea,
    Opcode.ST: load.execute_st,
    Opcode.STI: load.execute_sti,
    Opcode.STR: load.execute_str,

    # Control
    Opcode.BR: control.execute_br,
    Opcode.JMP: control.execute_jmp,
    Opcode.JSR: control.execute_jsr,
    Opcode.TRAP: control.execute_trap,
}
