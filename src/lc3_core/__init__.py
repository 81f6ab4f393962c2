"""
LC-3 エミュレータコアパッケージ。
"""
