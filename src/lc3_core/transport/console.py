# lc3_core/transport/console.py
"""
Transport Layer (コンソール)

このモジュールは、トラップルーチンとキーボードMMIOが使用するコンソール入出力を抽象化します。
CPUは生成時にConsoleを受け取り、標準入出力へ直接アクセスすることはありません。
"""
import os
import select
import sys
from abc import ABC, abstractmethod
from collections import deque
from contextlib import contextmanager
from typing import Deque, Iterator, List, Optional, TextIO

from lc3_core.common.errors import ConsoleClosedError


# @intent:responsibility コンソール入出力のインターフェースを定義します。
class Console(ABC):
    """
    LC-3のコンソールデバイスの抽象基底クラス。
    """
    # @intent:responsibility 1バイトを読み込むまでブロックします。
    # @intent:post-condition 入力がEOFに達した場合はConsoleClosedErrorを送出します。
    @abstractmethod
    def read_byte(self) -> int:
        pass

    # @intent:responsibility 入力済みのバイトがあれば1バイト取り出し、なければNoneを返します。
    # @intent:rationale キーボードステータスレジスタの読み込みから呼ばれるため、決してブロックしてはいけません。
    @abstractmethod
    def poll_byte(self) -> Optional[int]:
        pass

    @abstractmethod
    def write(self, text: str) -> None:
        pass

    @abstractmethod
    def flush(self) -> None:
        pass

    # @intent:responsibility 実行中の端末モードを切り替えるためのコンテキストを提供します。デフォルトは何もしません。
    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        yield


# @intent:responsibility プロセスの標準入出力を使用するコンソール実装。
class StdConsole(Console):
    """
    標準入力のファイルディスクリプタから直接バイトを読み込み、標準出力へ書き込みます。
    ポーリングには select を使用します。
    """
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._in_fd = self._stdin.fileno()

    def read_byte(self) -> int:
        self.flush()
        data = os.read(self._in_fd, 1)
        if not data:
            raise ConsoleClosedError("Console input reached end of stream.")
        return data[0]

    def poll_byte(self) -> Optional[int]:
        readable, _, _ = select.select([self._in_fd], [], [], 0)
        if not readable:
            return None
        data = os.read(self._in_fd, 1)
        if not data:
            # EOFはポーリングでは「入力なし」として扱う
            return None
        return data[0]

    def write(self, text: str) -> None:
        self._stdout.write(text)

    def flush(self) -> None:
        self._stdout.flush()

    # @intent:responsibility 標準入力が端末の場合、エコーと行バッファリングを無効化します。
    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        if not os.isatty(self._in_fd):
            yield
            return

        import termios
        import tty
        old_settings = termios.tcgetattr(self._in_fd)
        try:
            tty.setcbreak(self._in_fd)
            yield
        finally:
            termios.tcsetattr(self._in_fd, termios.TCSADRAIN, old_settings)


# @intent:responsibility あらかじめ用意した入力を供給し、出力をメモリ上に記録するコンソール実装。
# @intent:rationale テストや組み込み利用時に実端末へ触れずにトラップの挙動を検証するために使用します。
class ScriptedConsole(Console):
    """
    入力キューと出力バッファを持つメモリ上のコンソール。
    """
    def __init__(self, input_data: bytes = b""):
        self._input: Deque[int] = deque(input_data)
        self._output: List[str] = []
        self.flush_count = 0

    # @intent:responsibility 入力キューにバイト列を追加します。
    def feed(self, data: bytes) -> None:
        self._input.extend(data)

    @property
    def pending_input(self) -> int:
        return len(self._input)

    @property
    def output(self) -> str:
        return "".join(self._output)

    def read_byte(self) -> int:
        if not self._input:
            raise ConsoleClosedError("Scripted console has no more input.")
        return self._input.popleft()

    def poll_byte(self) -> Optional[int]:
        if not self._input:
            return None
        return self._input.popleft()

    def write(self, text: str) -> None:
        self._output.append(text)

    def flush(self) -> None:
        self.flush_count += 1
