"""
コマンドラインインターフェース。
"""
