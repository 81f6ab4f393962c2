"""
アーキテクチャ非依存のCPU抽象と状態定義。
"""
