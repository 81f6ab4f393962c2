"""
YAMLによるシステム構成。
"""
