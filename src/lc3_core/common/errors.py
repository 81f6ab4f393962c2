"""
エミュレータ全体で使用する例外階層。

ローダーのI/O失敗は呼び出し元で回復可能なエラーとして扱い、
デコード失敗やコンソールの切断は実行ループを停止させる致命的なエラーとして扱います。
"""


# @intent:responsibility 本パッケージが送出する全ての例外の基底クラス。
class Lc3Error(Exception):
    pass


# @intent:responsibility オブジェクトイメージの読み込みに失敗したことを示します。
# @intent:rationale 読み込み済みのワードはロールバックされません。
class ImageLoadError(Lc3Error):
    pass


# @intent:responsibility 命令または割り込みベクタのデコードに失敗したことを示す致命的エラー。
class DecodeError(Lc3Error):
    """
    デコードできない命令語に遭遇した場合に送出されます。
    `address` は命令がフェッチされたアドレス（不明な場合はNone）です。
    """
    def __init__(self, message: str, instruction: int, address=None):
        super().__init__(message)
        self.instruction = instruction
        self.address = address


# @intent:responsibility RTIや予約オペコードなど、未実装のオペコードを実行しようとしたことを示します。
class UnimplementedOpcodeError(DecodeError):
    pass


# @intent:responsibility サポート外のトラップベクタを示します。
class UnknownTrapVectorError(DecodeError):
    pass


# @intent:responsibility ブロッキング読み込み中にコンソール入力がEOFに達したことを示します。
class ConsoleClosedError(Lc3Error):
    pass


# @intent:responsibility 設定ファイルの内容が不正であることを示します。
class ConfigError(Lc3Error, ValueError):
    pass
