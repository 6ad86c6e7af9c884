# utils/constants.py
"""アプリケーション全体で共有する定数を定義するモジュール。"""
import os

# --- ストレージ ---
DEFAULT_MEMO_DIR: str = os.path.join(os.path.expanduser("~"), "MemoApp", "memos")

# --- ウィンドウ ---
WINDOW_TITLE: str = "ローカルメモ帳"
WINDOW_WIDTH: int = 720
WINDOW_HEIGHT: int = 480

# --- ページ ---
RESOURCES_DIR: str = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "ui", "resources"))
MEMO_PAGE_PATH: str = os.path.join(RESOURCES_DIR, "memo.html")
BRIDGE_OBJECT_NAME: str = "memoBridge"

# --- 環境変数 ---
ENV_MEMO_DIR: str = "MEMOAPP_MEMO_DIR"
ENV_LOG_LEVEL: str = "MEMOAPP_LOG_LEVEL"

DEFAULT_LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
