# lc3_core/arch/lc3/instructions/load.py
"""
ロード/ストア命令（LD, LDI, LDR, LEA, ST, STI, STR）の実装。

アドレス計算は全て16bitでラップアラウンドします。
ロード系命令はデスティネーションレジスタから条件フラグを再計算します。
"""
from lc3_core.arch.lc3.state import Lc3CpuState
from lc3_core.common.bits import wrap_add
from lc3_core.core.snapshot import Operation
from lc3_core.transport.bus import Bus
from .base import field_11_9, field_8_6, offset6, pc_offset9


# --- LD ---
# @intent:responsibility PC相対アドレスからロードします。
def execute_ld(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    dr = field_11_9(op.instruction)
    address = wrap_add(state.pc, pc_offset9(op.instruction))
    state.set_register(dr, bus.read(address))
    state.set_cc(dr)


# --- LDI ---
# @intent:responsibility PC相対アドレスに格納されたポインタを介して間接ロードします。
def execute_ldi(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    dr = field_11_9(op.instruction)
    pointer = bus.read(wrap_add(state.pc, pc_offset9(op.instruction)))
    state.set_register(dr, bus.read(pointer))
    state.set_cc(dr)


# --- LDR ---
# @intent:responsibility ベースレジスタ + offset6 のアドレスからロードします。
def execute_ldr(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    dr = field_11_9(op.instruction)
    base = state.get_register(field_8_6(op.instruction))
    state.set_register(dr, bus.read(wrap_add(base, offset6(op.instruction))))
    state.set_cc(dr)


# --- LEA ---
# @intent:responsibility 実効アドレスそのものをDRに格納します（メモリアクセスなし）。
def execute_lea(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    dr = field_11_9(op.instruction)
    state.set_register(dr, wrap_add(state.pc, pc_offset9(op.instruction)))
    state.set_cc(dr)


# --- ST ---
def execute_st(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    sr = state.get_register(field_11_9(op.instruction))
    bus.write(wrap_add(state.pc, pc_offset9(op.instruction)), sr)


# --- STI ---
def execute_sti(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    sr = state.get_register(field_11_9(op.instruction))
    pointer = bus.read(wrap_add(state.pc, pc_offset9(op.instruction)))
    bus.write(pointer, sr)


# --- STR ---
def execute_str(state: Lc3CpuState, bus: Bus, op: Operation) -> None:
    sr = state.get_register(field_11_9(op.instruction))
    base = state.get_register(field_8_6(op.instruction))
    bus.write(wrap_add(base, offset6(op.instruction)), sr)
