import unittest

from lc3_core.arch.lc3.cpu import Lc3Cpu
from lc3_core.arch.lc3.state import ConditionFlag
from lc3_core.transport.console import ScriptedConsole


class TestLc3LoadStoreInstructions(unittest.TestCase):
    def setUp(self):
        self.console = ScriptedConsole()
        self.cpu = Lc3Cpu.create(self.console)
        self.bus = self.cpu.bus
        self.state = self.cpu.get_state()

    def _execute(self, instruction):
        self.bus.write(0x3000, instruction)
        self.state.pc = 0x3000
        self.cpu.step()

    def test_ld(self):
        self.bus.write(0x3002, 0x8000)
        # LD R0, #1 -> address 0x3001 + 1
        self._execute(0x2001)
        self.assertEqual(self.state.get_register(0), 0x8000)
        self.assertTrue(self.state.flag_n)

    def test_ldi(self):
        self.bus.write(0x3002, 0x4000)
        self.bus.write(0x4000, 0x1234)
        # LDI R1, #1
        self._execute(0xA201)
        self.assertEqual(self.state.get_register(1), 0x1234)
        self.assertTrue(self.state.flag_p)

    def test_ldi_through_keyboard_status(self):
        self.console.feed(b"q")
        self.bus.write(0x3002, 0xFE00)
        # LDI R1, #1 -> KBSR
        self._execute(0xA201)
        self.assertEqual(self.state.get_register(1), 0x8000)
        self.assertEqual(self.bus.peek(0xFE02), ord("q"))

    def test_ldr_negative_offset(self):
        self.state.set_register(2, 0x4001)
        self.bus.write(0x4000, 7)
        # LDR R1, R2, #-1
        self._execute(0x62BF)
        self.assertEqual(self.state.get_register(1), 7)

    def test_ldr_address_wraps(self):
        self.state.set_register(2, 0xFFFF)
        self.bus.write(0x0001, 0x0055)
        # LDR R1, R2, #2
        self._execute(0x6282)
        self.assertEqual(self.state.get_register(1), 0x0055)

    def test_ldr_zero_sets_zero_flag(self):
        self.state.cond = ConditionFlag.NEG
        self.state.set_register(2, 0x4000)
        self._execute(0x6280)
        self.assertTrue(self.state.flag_z)

    def test_lea(self):
        # LEA R0, #2
        self._execute(0xE002)
        self.assertEqual(self.state.get_register(0), 0x3003)
        self.assertTrue(self.state.flag_p)

        # LEA R3, #-1
        self._execute(0xE7FF)
        self.assertEqual(self.state.get_register(3), 0x3000)

    def test_st_does_not_touch_flags(self):
        self.state.set_register(1, 0xBEEF)
        # ST R1, #1
        self._execute(0x3201)
        self.assertEqual(self.bus.peek(0x3002), 0xBEEF)
        self.assertEqual(self.state.cond, ConditionFlag.ZRO)

    def test_sti(self):
        self.state.set_register(1, 0x0042)
        self.bus.write(0x3002, 0x4000)
        # STI R1, #1
        self._execute(0xB201)
        self.assertEqual(self.bus.peek(0x4000), 0x0042)

    def test_str(self):
        self.state.set_register(1, 0x0099)
        self.state.set_register(2, 0x4000)
        # STR R1, R2, #1
        self._execute(0x7281)
        self.assertEqual(self.bus.peek(0x4001), 0x0099)


if __name__ == '__main__':
    unittest.main()
