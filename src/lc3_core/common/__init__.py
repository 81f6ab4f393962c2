"""
共通ユーティリティ（型、ビット操作、例外）。
"""
