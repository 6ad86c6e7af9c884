# utils/app_config.py
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from utils.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_MEMO_DIR,
    ENV_LOG_LEVEL,
    ENV_MEMO_DIR,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)


@dataclass
class AppConfig:
    """アプリケーションの実行時設定を表現するデータモデル。

    Attributes:
        memo_dir (str): メモファイルを保存するディレクトリの絶対パス。
        log_level (str): ログ出力レベル名（例: "INFO", "DEBUG"）。
        window_title (str): メインウィンドウのタイトル。
        window_width (int): メインウィンドウの初期幅。
        window_height (int): メインウィンドウの初期高さ。
    """
    memo_dir: str = DEFAULT_MEMO_DIR
    log_level: str = DEFAULT_LOG_LEVEL
    window_title: str = WINDOW_TITLE
    window_width: int = WINDOW_WIDTH
    window_height: int = WINDOW_HEIGHT


def _normalize_log_level(value: Optional[str]) -> str:
    """ログレベル名を正規化する。未知の値はデフォルトに戻す。"""
    if not value:
        return DEFAULT_LOG_LEVEL
    name = value.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def load_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """環境変数（および .env ファイル）から AppConfig を構築する。

    Args:
        env (Optional[Mapping[str, str]]): 参照する環境変数。省略時は .env を読み込んだ上で
                                           os.environ を使用します。

    Returns:
        AppConfig: 構築された設定。
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    memo_dir = env.get(ENV_MEMO_DIR, "").strip()
    memo_dir = os.path.abspath(os.path.expanduser(memo_dir)) if memo_dir else DEFAULT_MEMO_DIR

    return AppConfig(
        memo_dir=memo_dir,
        log_level=_normalize_log_level(env.get(ENV_LOG_LEVEL)),
    )
