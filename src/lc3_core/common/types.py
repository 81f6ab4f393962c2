"""
共通の型定義と定数を提供するモジュール。
プロジェクト全体で使用される汎用的な型エイリアスなどを定義します。
"""
from typing import List

# @intent:data_structure 16bitワードを表す型エイリアス。値域は 0x0000-0xFFFF。
Word = int

# @intent:data_structure 汎用レジスタのインデックス（0-7）を表す型エイリアス。
RegisterIndex = int

# @intent:constant アドレス空間とワード幅に関する定数。
MEMORY_SIZE = 0x10000
WORD_MASK = 0xFFFF
NUM_REGISTERS = 8

# @intent:constant プログラムカウンタの既定の開始位置。
PC_START = 0x3000

# @intent:constant メモリマップドI/Oのキーボードレジスタ。
KBSR = 0xFE00  # Keyboard Status
KBDR = 0xFE02  # Keyboard Data

# @intent:data_structure メモリ内容のダンプ（ワード列）を表す型エイリアス。
WordList = List[Word]
