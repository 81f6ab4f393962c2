# lc3_core/arch/lc3/instructions/__init__.py
"""
LC-3命令セット実装パッケージ。
"""
from lc3_core.arch.lc3.opcodes import Opcode
from lc3_core.arch.lc3.state import Lc3CpuState
from lc3_core.core.snapshot import Operation
from lc3_core.transport.bus import Bus
from .maps import EXECUTE_MAP


# @intent:responsibility 命令語をデコードし、Operationオブジェクトを返します。
# @intent:post-condition RTIや予約オペコードはUnimplementedOpcodeErrorとして失敗します。
def decode_instruction(instruction: int, address: int) -> Operation:
    opcode = Opcode.from_instruction(instruction, address)
    return Operation(address=address, instruction=instruction, opcode=opcode)


# @intent:responsibility デコードされたLC-3命令を実行します。
def execute_instruction(operation: Operation, state: Lc3CpuState, bus: Bus) -> None:
    """
    デコードされた命令を実行し、CPUの状態を変更します。
    TRAPはリンクのみを行い、トラップルーチンの実行は呼び出し側が行います。
    """
    EXECUTE_MAP[operation.opcode](state, bus, operation)
