"""
LC-3アーキテクチャ実装パッケージ。
"""
