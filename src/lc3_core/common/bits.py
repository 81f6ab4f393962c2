"""
ビット操作ユーティリティ。

命令語からのフィールド抽出と2の補数の符号拡張を行う純粋関数群です。
即値やオフセットを扱う全ての命令ハンドラから利用されます。
"""
from lc3_core.common.types import Word, WORD_MASK


# @intent:utility_function 命令語から指定位置・幅のビットフィールドを取り出します。
def bit_field(word: Word, shift: int, width: int) -> int:
    """
    `word` の `shift` ビット目から `width` ビット分を取り出して返します。
    """
    return (word >> shift) & ((1 << width) - 1)


# @intent:utility_function `bit_count` ビットの値として見たときに負数かどうかを判定します。
# @intent:pre-condition bit_count は 1 以上 16 以下である必要があります。
def is_negative(value: Word, bit_count: int) -> bool:
    """
    ビット位置 (bit_count - 1) が1であればTrueを返します。
    """
    return ((value >> (bit_count - 1)) & 1) == 1


# @intent:utility_function 下位 `bit_count` ビットを2の補数とみなし、16bitへ符号拡張します。
# @intent:rationale 上位ビットは入力をそのまま残し、符号ビットが1の場合のみ上位を全て1で埋めます。
def sign_extend(value: Word, bit_count: int) -> Word:
    """
    符号ビットが0なら入力をそのまま返し、1なら上位ビットを全て1にした値を返します。
    結果は16bitにマスクされます。
    """
    if is_negative(value, bit_count):
        value |= (WORD_MASK << bit_count)
    return value & WORD_MASK


# @intent:utility_function 16bitのラップアラウンド加算を行います。
def wrap_add(a: Word, b: Word) -> Word:
    return (a + b) & WORD_MASK
