# tests/core/test_cpu.py
"""
lc3_core.core.cpuモジュールの単体テスト。
"""
import pytest

from lc3_core.common.errors import DecodeError
from lc3_core.core.cpu import AbstractCpu
from lc3_core.core.snapshot import Operation
from lc3_core.core.state import CpuState
from lc3_core.transport.bus import Bus
from lc3_core.transport.console import ScriptedConsole

# @intent:test_suite 抽象CPUの命令サイクルと実行状態の遷移を検証します。


class CountingCpu(AbstractCpu):
    """
    メモリの値を命令語として扱い、0xFFFFでHALT、0xDEADでデコードエラーとなるテスト用CPU。
    """
    def _create_initial_state(self) -> CpuState:
        return CpuState(pc=0x0000)

    def _fetch(self) -> int:
        return self._bus.read(self._state.pc)

    def _decode(self, instruction: int) -> Operation:
        if instruction == 0xDEAD:
            raise DecodeError("bad instruction", instruction, self._state.pc - 1)
        return Operation(address=self._state.pc - 1, instruction=instruction, opcode=None)

    def _execute(self, operation: Operation) -> None:
        if operation.instruction == 0xFFFF:
            self.halt()


@pytest.fixture
def cpu():
    return CountingCpu(Bus(ScriptedConsole()))


# @intent:test_case_step stepがPCを進め、実行した命令を返すことを検証します。
def test_step_advances_pc(cpu):
    cpu.bus.write(0x0000, 0x1234)
    operation = cpu.step()
    assert operation.instruction == 0x1234
    assert operation.address == 0x0000
    assert cpu.get_state().pc == 0x0001
    assert cpu.instruction_count == 1


# @intent:test_case_run HALTまで実行し、その後のstepが何もしないことを検証します。
def test_run_until_halt(cpu):
    cpu.bus.write(0x0002, 0xFFFF)
    cpu.run()
    assert not cpu.is_running
    assert cpu.instruction_count == 3
    assert cpu.get_state().pc == 0x0003
    assert cpu.step() is None
    assert cpu.get_state().pc == 0x0003


def test_pc_wraps_around(cpu):
    cpu.get_state().pc = 0xFFFF
    cpu.step()
    assert cpu.get_state().pc == 0x0000


# @intent:test_case_fatal 致命的なエラーでCPUが停止し、例外が伝播することを検証します。
def test_fatal_error_stops_run(cpu):
    cpu.bus.write(0x0001, 0xDEAD)
    with pytest.raises(DecodeError):
        cpu.run()
    assert not cpu.is_running


def test_reset_and_resume(cpu):
    cpu.bus.write(0x0000, 0xFFFF)
    cpu.run()
    assert not cpu.is_running

    cpu.bus.write(0x0001, 0xFFFF)
    cpu.resume()
    assert cpu.instruction_count == 2
    assert cpu.get_state().pc == 0x0002

    cpu.reset()
    assert cpu.is_running
    assert cpu.instruction_count == 0
    assert cpu.get_state().pc == 0x0000
