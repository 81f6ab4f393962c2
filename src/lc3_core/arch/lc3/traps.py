# lc3_core/arch/lc3/traps.py
"""
トラップルーチン（GETC, OUT, PUTS, IN, PUTSP, HALT）の実装。

各ルーチンはコンストラクタで注入されたConsoleを介して入出力を行います。
"""
import logging

from lc3_core.arch.lc3.opcodes import TrapVector
from lc3_core.arch.lc3.state import Lc3CpuState
from lc3_core.common.types import WORD_MASK
from lc3_core.transport.bus import Bus
from lc3_core.transport.console import Console

logger = logging.getLogger(__name__)

DEFAULT_IN_PROMPT = "Enter a character: "


# @intent:responsibility トラップベクタに応じたシステムコール相当の処理を行います。
class TrapDispatcher:
    """
    トラップベクタをデコード済みのTrapVectorとして受け取り、対応するルーチンを実行します。
    """
    def __init__(self, console: Console, in_prompt: str = DEFAULT_IN_PROMPT):
        self._console = console
        self._in_prompt = in_prompt
        self._routines = {
            TrapVector.GETC: self._getc,
            TrapVector.OUT: self._out,
            TrapVector.PUTS: self._puts,
            TrapVector.IN: self._in,
            TrapVector.PUTSP: self._putsp,
        }

    @property
    def console(self) -> Console:
        return self._console

    # @intent:responsibility トラップルーチンを実行します。
    # @intent:return マシンを停止すべき場合（HALT）はTrue。
    def dispatch(self, vector: TrapVector, state: Lc3CpuState, bus: Bus) -> bool:
        logger.debug("TRAP %s (x%02X) at PC %#06x", vector.name, vector.value, state.pc)
        if vector is TrapVector.HALT:
            self._console.flush()
            return True
        self._routines[vector](state, bus)
        return False

    def _getc(self, state: Lc3CpuState, bus: Bus) -> None:
        state.set_register(0, self._console.read_byte())

    def _out(self, state: Lc3CpuState, bus: Bus) -> None:
        self._console.write(chr(state.get_register(0) & 0xFF))
        self._console.flush()

    # @intent:responsibility R0が指すヌル終端のワード列（1ワード1文字）を出力します。
    def _puts(self, state: Lc3CpuState, bus: Bus) -> None:
        address = state.get_register(0)
        chars = []
        word = bus.peek(address)
        while word != 0:
            chars.append(chr(word & 0xFF))
            address = (address + 1) & WORD_MASK
            word = bus.peek(address)
        self._console.write("".join(chars))
        self._console.flush()

    def _in(self, state: Lc3CpuState, bus: Bus) -> None:
        self._console.write(self._in_prompt)
        self._console.flush()
        data = self._console.read_byte()
        self._console.write(chr(data))
        self._console.flush()
        state.set_register(0, data)

    # @intent:responsibility R0が指す、1ワードに2文字（下位バイト→上位バイト）詰められた文字列を出力します。
    # @intent:post-condition 最初のゼロバイトで停止します。同じワードの直前の非ゼロ下位バイトは出力されます。
    def _putsp(self, state: Lc3CpuState, bus: Bus) -> None:
        address = state.get_register(0)
        chars = []
        while True:
            word = bus.peek(address)
            low = word & 0xFF
            if low == 0:
                break
            chars.append(chr(low))
            high = (word >> 8) & 0xFF
            if high == 0:
                break
            chars.append(chr(high))
            address = (address + 1) & WORD_MASK
        self._console.write("".join(chars))
        self._console.flush()
