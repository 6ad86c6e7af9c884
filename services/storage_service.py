# services/storage_service.py
import logging
import os
from typing import Optional

from utils.constants import DEFAULT_MEMO_DIR


class StorageService:
    """メモを保存するディレクトリを管理するサービスクラス。

    起動時にディレクトリを作成し、各操作の前にはディレクトリの存在を再確認します。
    ディレクトリは外部から削除される可能性があるため、パスの解決は必ず
    resolve_memo_path を経由します。
    """

    def __init__(self, base_path: str = DEFAULT_MEMO_DIR, logger: Optional[logging.Logger] = None) -> None:
        """StorageServiceのコンストラクタ。

        Args:
            base_path (str): メモを保存する基準ディレクトリのパス。
                             存在しない場合は自動的に作成されます。作成に失敗しても
                             例外は送出せず、ログに記録します。
            logger (Optional[logging.Logger]): 使用するロガー。
        """
        self.base_path = os.path.abspath(base_path)
        self.logger = logger or logging.getLogger(__name__)
        self.ensure_directory()

    def ensure_directory(self) -> bool:
        """基準ディレクトリが存在することを保証する。何度呼び出しても安全。

        Returns:
            bool: ディレクトリが利用可能であればTrue、作成に失敗した場合はFalse。
        """
        if os.path.isdir(self.base_path):
            return True
        try:
            os.makedirs(self.base_path, exist_ok=True)
        except OSError as e:
            self.logger.error("メモディレクトリの作成に失敗しました: %s, %s", self.base_path, e, exc_info=True)
            return False
        self.logger.info("メモディレクトリを作成しました: %s", self.base_path)
        return True

    def get_path(self, file_name: str) -> str:
        """ベースパスとファイル名を結合して完全なファイルパスを取得する。

        Args:
            file_name (str): ファイル名。

        Returns:
            str: 完全なファイルパス。
        """
        return os.path.join(self.base_path, file_name)

    @staticmethod
    def is_valid_name(file_name: Optional[str]) -> bool:
        """ファイル名が基準ディレクトリ直下を指す単一の名前かどうかを判定する。"""
        if not file_name or not file_name.strip():
            return False
        if file_name in (".", "..") or "\x00" in file_name:
            return False
        separators = {os.sep, "/", "\\"}
        if os.altsep:
            separators.add(os.altsep)
        return not any(sep in file_name for sep in separators)

    def resolve_memo_path(self, file_name: Optional[str]) -> Optional[str]:
        """ディレクトリの存在を再確認した上で、ファイル名を完全パスに解決する。

        すべてのリポジトリ操作はこのメソッドを経由してファイルにアクセスします。

        Args:
            file_name (Optional[str]): 解決するファイル名。

        Returns:
            Optional[str]: 完全なファイルパス。名前が不正な場合はNone。
        """
        if not self.is_valid_name(file_name):
            self.logger.warning("不正なファイル名です: %r", file_name)
            return None
        exists = self.ensure_directory()
        path = self.get_path(file_name)
        self.logger.debug("パスを解決しました: %s (ディレクトリ存在: %s)", path, exists)
        return path
