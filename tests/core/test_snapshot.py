# tests/core/test_snapshot.py
"""
lc3_core.core.snapshotモジュールの単体テスト。
"""
from array import array

import pytest

from lc3_core.arch.lc3.opcodes import Opcode
from lc3_core.arch.lc3.state import Lc3CpuState
from lc3_core.core.snapshot import Operation, Snapshot


class TestOperation:
    def test_operation_init(self):
        op = Operation(address=0x3000, instruction=0xF025, opcode=Opcode.TRAP)
        assert op.address == 0x3000
        assert op.instruction == 0xF025
        assert op.mnemonic == "TRAP"

    # @intent:test_case_immutability Operationが不変であることを検証します。
    def test_operation_immutability(self):
        op = Operation(address=0x3000, instruction=0x0000, opcode=Opcode.BR)
        with pytest.raises(AttributeError):
            op.instruction = 0x1234


class TestSnapshot:
    def test_snapshot_immutability(self):
        snapshot = Snapshot(state=Lc3CpuState(), memory=array("H", [0] * 4))
        with pytest.raises(AttributeError):
            snapshot.state = Lc3CpuState(pc=0x4000)
        with pytest.raises(AttributeError):
            snapshot.memory = array("H")

    def test_snapshot_field_order(self):
        memory = array("H", [1, 2])
        snapshot = Snapshot(Lc3CpuState(pc=0x3001), memory)
        assert snapshot.state.pc == 0x3001
        assert snapshot.memory is memory
