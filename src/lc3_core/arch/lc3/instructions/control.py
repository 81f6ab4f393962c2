# lc3_core/arch/lc3/instructions/control.py
"""
制御命令（分岐、ジャンプ、サブルーチン、トラップ）の実装。
"""
from lc3_core.arch.lc3.state import Lc3CpuState
from lc3_core.common.bits import bit_field, wrap_add
from lc3_core.core.snapshot import Operation
from lc3_core.transport.bus import Bus
from .base import field_11_9, field_8_6, pc_offset9, pc_offset11

# @intent:constant リンクレジスタ（戻りアドレスの格納先）。
LINK_REGISTER = 7


# --- BR ---
# @intent:responsibility nzpフィールドと現在の条件フラグが一致する場合に分岐します。
def execute_br(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    nzp = field_11_9(op.instruction)
    if nzp & state.cond:
        state.pc = wrap_add(state.pc, pc_offset9(op.instruction))


# --- JMP / RET ---
# @intent:responsibility ベースレジスタの値へジャンプします。BaseR = R7 の場合はRETとして振る舞います。
def execute_jmp(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    state.pc = state.get_register(field_8_6(op.instruction))


# --- JSR / JSRR ---
# @intent:responsibility 戻りアドレスをR7に保存してサブルーチンへジャンプします。
# @intent:rationale JSRRのベースレジスタはリンク前に読み出します。これにより JSRR R7 は元のR7へジャンプします。
def execute_jsr(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    # state.pc はフェッチ時に既に次の命令を指している
    return_address = state.pc
    if bit_field(op.instruction, 11, 1):
        target = wrap_add(state.pc, pc_offset11(op.instruction))
    else:
        target = state.get_register(field_8_6(op.instruction))
    state.set_register(LINK_REGISTER, return_address)
    state.pc = target


# --- TRAP ---
# @intent:responsibility 戻りアドレスをR7に保存します。トラップルーチン自体の実行はTrapDispatcherが行います。
def execute_trap(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    state.set_register(LINK_REGISTER, state.pc)
