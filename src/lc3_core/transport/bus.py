# lc3_core/transport/bus.py
"""
Transport Layer (メモリバス)

このモジュールは、LC-3の16bitワードアドレス空間を抽象化し、
メモリマップドI/O（キーボード）の読み込みをインターセプトする責務を負います。
"""
from abc import ABC, abstractmethod
from array import array
from typing import Iterable

from lc3_core.common.types import Word, WORD_MASK, MEMORY_SIZE, KBSR, KBDR
from lc3_core.transport.console import Console


# @intent:responsibility バスの抽象デバイスインターフェースを定義します。
class Device(ABC):
    """
    バスに接続されるデバイスの抽象基底クラス。
    全てのデバイスはreadとwriteのインターフェースを実装する必要があります。
    """
    # @intent:responsibility 指定されたアドレスから16bitのワードを読み出す責務を負います。
    # @intent:pre-condition アドレスはデバイスの有効範囲内である必要があります。
    @abstractmethod
    def read(self, address: int) -> Word:
        pass

    # @intent:responsibility 指定されたアドレスに16bitのワードを書き込みます。
    # @intent:pre-condition アドレスはデバイスの有効範囲内であり、データは16bit値である必要があります。
    @abstractmethod
    def write(self, address: int, data: Word) -> None:
        pass


# @intent:responsibility 16bitワード単位のRAMデバイスの機能を提供します。
class RAM(Device):
    """
    ワードアドレッシングのRAMデバイス。全ワードは0で初期化されます。
    """
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int = MEMORY_SIZE):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("RAM size must be a positive integer.")
        self._memory = array("H", bytes(size * 2))
        self._size = size

    def read(self, address: int) -> Word:
        if not 0 <= address < self._size:
            raise IndexError(f"Address {address} out of bounds for RAM of size {self._size}.")
        return self._memory[address]

    def write(self, address: int, data: Word) -> None:
        if not 0 <= address < self._size:
            raise IndexError(f"Address {address} out of bounds for RAM of size {self._size}.")
        if not 0 <= data <= WORD_MASK:
            raise ValueError(f"Data {data} is not a 16-bit value.")
        self._memory[address] = data

    def get_size(self) -> int:
        return self._size

    # @intent:responsibility メモリ内容の独立したコピーを返します。
    def dump(self) -> array:
        return array("H", self._memory)

    # @intent:responsibility ダンプされたワード列でメモリ内容を置き換えます。
    # @intent:pre-condition wordsの長さはRAMのサイズと一致する必要があります。
    def restore(self, words: Iterable[Word]) -> None:
        memory = array("H", words)
        if len(memory) != self._size:
            raise ValueError(
                f"Memory image has {len(memory)} words, expected {self._size}."
            )
        self._memory = memory


# @intent:responsibility LC-3のアドレス空間を管理し、キーボードのMMIOを処理するバス。
class Bus:
    """
    65536ワードのフラットなメモリと、キーボードステータス/データレジスタを持つバス。
    KBSRの読み込み時のみ副作用としてコンソールをポーリングします。
    """
    def __init__(self, console: Console, ram: RAM = None):
        self._console = console
        self._ram = ram if ram is not None else RAM(MEMORY_SIZE)

    @property
    def console(self) -> Console:
        return self._console

    # @intent:responsibility キーボードをポーリングし、KBSR/KBDRを更新します。
    # @intent:rationale ポーリングは非ブロッキングであり、入力が無ければステータスをクリアします。
    def _poll_keyboard(self) -> None:
        data = self._console.poll_byte()
        if data is not None:
            self._ram.write(KBSR, 1 << 15)
            self._ram.write(KBDR, data)
        else:
            self._ram.write(KBSR, 0)

    # @intent:responsibility 指定されたアドレスから16bitのワードを読み出します。
    def read(self, address: int) -> Word:
        """
        指定されたアドレスからワードを読み出します。
        KBSRの読み込みはキーボードのポーリングを伴います。
        """
        if address == KBSR:
            self._poll_keyboard()
        return self._ram.read(address)

    # @intent:responsibility 副作用なしにワードを読み出します。
    def peek(self, address: int) -> Word:
        """
        MMIOのポーリングを行わずにワードを読み出します。
        文字列出力トラップや外部からの検査用。
        """
        return self._ram.read(address)

    def write(self, address: int, data: Word) -> None:
        self._ram.write(address, data)

    def dump(self) -> array:
        return self._ram.dump()

    def restore(self, words: Iterable[Word]) -> None:
        self._ram.restore(words)
