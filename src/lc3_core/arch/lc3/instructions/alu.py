# lc3_core/arch/lc3/instructions/alu.py
"""
算術論理演算命令（ADD, AND, NOT）の実装。
"""
from lc3_core.arch.lc3.state import Lc3CpuState
from lc3_core.common.bits import bit_field, wrap_add
from lc3_core.core.snapshot import Operation
from lc3_core.transport.bus import Bus
from .base import field_11_9, field_8_6, field_2_0, imm5


# @intent:utility_function 第2オペランドを取得します。ビット5が1なら即値、0ならレジスタです。
def _operand2(state: Lc3CpuState, instruction: int) -> int:
    if bit_field(instruction, 5, 1):
        return imm5(instruction)
    return state.get_register(field_2_0(instruction))


# --- ADD ---
# @intent:responsibility ADD命令を実行し、結果をDRに格納してフラグを更新します。
def execute_add(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    dr = field_11_9(op.instruction)
    sr1 = state.get_register(field_8_6(op.instruction))
    state.set_register(dr, wrap_add(sr1, _operand2(state, op.instruction)))
    state.set_cc(dr)


# --- AND ---
def execute_and(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    dr = field_11_9(op.instruction)
    sr1 = state.get_register(field_8_6(op.instruction))
    state.set_register(dr, sr1 & _operand2(state, op.instruction))
    state.set_cc(dr)


# --- NOT ---
def execute_not(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    dr = field_11_9(op.instruction)
    sr = state.get_register(field_8_6(op.instruction))
    state.set_register(dr, ~sr)
    state.set_cc(dr)
