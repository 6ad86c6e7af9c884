# models/memo_models.py
from dataclasses import dataclass
from datetime import datetime

MEMO_EXTENSION = ".txt"
MEMO_PREFIX = "memo_"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


@dataclass
class Memo:
    """ユーザーが作成する単一のメモを表現するデータモデル。

    メモの識別子はファイル名そのものであり、別途IDは持ちません。

    Attributes:
        filename (str): 拡張子 .txt を含むファイル名。
        content (str): メモの本文（UTF-8 テキスト、空文字列も可）。
    """
    filename: str
    content: str = ""


def with_extension(name: str) -> str:
    """拡張子なしの名前にメモ拡張子を付加する。"""
    return name + MEMO_EXTENSION


def timestamp_filename(now: datetime) -> str:
    """日時から memo_YYYYMMDD_HHMMSS.txt 形式のファイル名を生成する。

    Args:
        now (datetime): ファイル名に埋め込むローカル日時。

    Returns:
        str: 生成されたファイル名。
    """
    return with_extension(MEMO_PREFIX + now.strftime(TIMESTAMP_FORMAT))
