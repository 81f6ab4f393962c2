"""
オブジェクトイメージのローダー。
"""
