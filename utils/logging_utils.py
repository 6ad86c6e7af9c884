# utils/logging_utils.py
import logging
import sys

from utils.constants import LOG_FORMAT

_HANDLER_NAME = "memoapp-console"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """ルートロガーにコンソール出力ハンドラを設定する。

    何度呼び出してもハンドラは一つだけ登録されます。

    Args:
        level (str): ログレベル名。

    Returns:
        logging.Logger: 設定済みのルートロガー。
    """
    root = logging.getLogger()
    root.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    return root
