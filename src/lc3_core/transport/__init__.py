"""
メモリバスとコンソールデバイス。
"""
