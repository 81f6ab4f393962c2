# lc3_core/loader/loader.py
"""
コードローダーモジュール。
LC-3オブジェクトイメージ（ビッグエンディアンの16bitワード列）のロードをサポートします。
"""
import logging
from typing import BinaryIO

from lc3_core.common.errors import ImageLoadError
from lc3_core.common.types import MEMORY_SIZE
from lc3_core.transport.bus import Bus

logger = logging.getLogger(__name__)


class ObjectImageLoader:
    """
    オブジェクトイメージを解析し、データをバスにロードするローダー。

    先頭ワードがロード開始アドレス（origin）、以降のワードがoriginからの連続したメモリ内容です。
    長さフィールドやチェックサムはなく、ストリームの終端がイメージの終端です。
    """
    # @intent:responsibility バイトストリームからイメージを読み込み、originを返します。
    # @intent:post-condition 失敗した場合もそれまでに書き込んだワードはロールバックされません。
    def load(self, stream: BinaryIO, bus: Bus) -> int:
        try:
            data = stream.read()
        except OSError as e:
            raise ImageLoadError(f"Failed to read object image: {e}") from e

        if len(data) < 2:
            raise ImageLoadError("Object image is too short: missing origin word.")

        origin = int.from_bytes(data[0:2], "big")
        address = origin
        count = 0
        for offset in range(2, len(data) - 1, 2):
            if address >= MEMORY_SIZE:
                raise ImageLoadError(
                    f"Object image loaded at {origin:#06x} overruns the end of memory "
                    f"after {count} words."
                )
            bus.write(address, int.from_bytes(data[offset:offset + 2], "big"))
            address += 1
            count += 1

        if len(data) % 2:
            raise ImageLoadError(
                f"Object image is truncated: trailing odd byte after {count} words."
            )

        logger.info("Loaded %d words at origin %#06x", count, origin)
        return origin

    # @intent:responsibility ファイルパスからイメージを読み込みます。
    def load_file(self, file_path: str, bus: Bus) -> int:
        try:
            with open(file_path, "rb") as f:
                return self.load(f, bus)
        except OSError as e:
            raise ImageLoadError(f"Cannot open object image {file_path}: {e}") from e
