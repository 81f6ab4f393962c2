"""
アーキテクチャ実装パッケージ。
"""
