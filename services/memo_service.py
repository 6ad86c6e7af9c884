# services/memo_service.py
import datetime
import logging
import os
from typing import Callable, List, Optional

from .base_service import BaseService
from .storage_service import StorageService
from models.memo_models import MEMO_EXTENSION, Memo, timestamp_filename, with_extension

PREVIEW_LENGTH = 50


class MemoService(BaseService[Memo]):
    """メモファイルのCRUD操作を管理するサービスクラス。

    メモの保存、一覧取得、読み込み、削除、名前変更の機能を提供します。
    メモは基準ディレクトリ直下の .txt ファイルとして保存され、ファイル名がそのまま
    メモの識別子になります。メモリ上にキャッシュは持たず、すべての操作が
    ファイルシステムを直接参照します。

    ファイルシステムのエラーは例外として呼び出し元に伝えず、ログに記録した上で
    空文字列・False・空リストのいずれかに変換します。
    """

    def __init__(
        self,
        storage_service: Optional[StorageService] = None,
        logger: Optional[logging.Logger] = None,
        clock: Callable[[], datetime.datetime] = datetime.datetime.now
    ) -> None:
        """MemoServiceのコンストラクタ。

        Args:
            storage_service (Optional[StorageService]): メモディレクトリを管理するストレージサービス。
                                                        省略時はデフォルトのディレクトリを使用します。
            logger (Optional[logging.Logger]): 使用するロガー。
            clock (Callable[[], datetime]): タイムスタンプ名の生成に使う現在時刻の取得関数。
        """
        super().__init__(storage_service=storage_service or StorageService(), logger=logger)
        self.clock = clock

    def resolve_filename(self, filename: Optional[str] = None) -> str:
        """保存先のファイル名を決定する。

        前後の空白を除いた名前が空でなければその名前に .txt を付けたものを、
        そうでなければ現在時刻から memo_YYYYMMDD_HHMMSS.txt を生成します。
        同一秒内に名前なしで保存した場合は同じ名前になり、後の保存が上書きします。

        Args:
            filename (Optional[str]): ユーザーが指定した拡張子なしのファイル名。

        Returns:
            str: 拡張子を含む最終的なファイル名。
        """
        if filename is not None and filename.strip():
            final_filename = with_extension(filename.strip())
            self.logger.info("ユーザー指定のファイル名を使用: %s", final_filename)
        else:
            final_filename = timestamp_filename(self.clock())
            self.logger.info("タイムスタンプのファイル名を使用: %s", final_filename)
        return final_filename

    def save_memo(self, content: Optional[str], filename: Optional[str] = None) -> Optional[str]:
        """メモを保存する。同名のファイルがあれば内容を完全に置き換える。

        Args:
            content (Optional[str]): 保存する本文。None の場合は空文字列として保存します。
            filename (Optional[str]): 拡張子なしのファイル名。空または None の場合はタイムスタンプ名。

        Returns:
            Optional[str]: 保存したファイル名。保存に失敗した場合はNone。
        """
        self.logger.debug("saveMemo: content長=%d, filename=%r", len(content or ""), filename)
        memo = Memo(filename=self.resolve_filename(filename), content=content or "")
        try:
            self.save_data(memo)
        except (OSError, UnicodeError) as e:
            self.logger.error("メモの保存に失敗しました: %s, %s", memo.filename, e, exc_info=True)
            return None
        except ValueError as e:
            self.logger.warning("メモを保存できません: %s", e)
            return None
        return memo.filename

    def list_memos(self) -> List[str]:
        """ディレクトリ内の .txt ファイル名を昇順で取得する。

        Returns:
            List[str]: ファイル名のリスト。列挙に失敗した場合は空リスト。
        """
        storage = self.storage_service
        exists = storage.ensure_directory()
        self.logger.debug("メモ一覧のディレクトリ: %s (存在: %s)", storage.base_path, exists)
        try:
            with os.scandir(storage.base_path) as entries:
                filenames = sorted(
                    entry.name for entry in entries
                    if entry.name.endswith(MEMO_EXTENSION) and entry.is_file()
                )
        except OSError as e:
            self.logger.error("メモ一覧の読み込みに失敗しました: %s, %s", storage.base_path, e, exc_info=True)
            return []
        self.logger.info("メモ一覧: %d件", len(filenames))
        return filenames

    def load_memo(self, filename: str) -> str:
        """メモの本文を読み込む。

        ファイルが存在しない場合も読み込みに失敗した場合も空文字列を返すため、
        呼び出し元は「空のメモ」と「存在しないメモ」を区別できません。

        Args:
            filename (str): 拡張子を含むファイル名。

        Returns:
            str: メモの本文。
        """
        try:
            memo = self.load_data(filename)
        except (OSError, ValueError) as e:
            self.logger.error("メモの読み込みに失敗しました: %s, %s", filename, e, exc_info=True)
            return ""
        if memo is None:
            return ""
        return memo.content

    def delete_memo(self, filename: str) -> bool:
        """メモファイルを削除する。

        Args:
            filename (str): 拡張子を含むファイル名。

        Returns:
            bool: 実際に削除した場合はTrue。ファイルが存在しない、または削除に失敗した場合はFalse。
        """
        path = self.storage_service.resolve_memo_path(filename)
        if path is None:
            return False
        self.logger.debug("削除するファイルのパス: %s", path)

        if not os.path.exists(path):
            self.logger.warning("削除するファイルが存在しません: %s", filename)
            return False

        try:
            size = os.path.getsize(path)
            os.remove(path)
        except (OSError, ValueError) as e:
            self.logger.error("メモの削除に失敗しました: %s, %s", filename, e, exc_info=True)
            return False
        self.logger.info("メモを削除しました: %s (%d bytes)", filename, size)
        return True

    def rename_memo(self, old_filename: str, new_filename: str) -> bool:
        """メモファイルの名前を変更する。既存のファイルは上書きしない。

        Args:
            old_filename (str): 変更前のファイル名（拡張子を含む）。
            new_filename (str): 変更後のファイル名（拡張子なし）。

        Returns:
            bool: 名前を変更した場合はTrue。元のファイルが存在しない、変更後の名前が
                  既に存在する、または移動に失敗した場合はFalse。
        """
        old_path = self.storage_service.resolve_memo_path(old_filename)
        if old_path is None:
            return False
        if new_filename is None or not new_filename.strip():
            self.logger.warning("変更後のファイル名が空です")
            return False
        target_name = with_extension(new_filename)
        new_path = self.storage_service.resolve_memo_path(target_name)
        if new_path is None:
            return False

        if not os.path.exists(old_path):
            self.logger.warning("名前を変更するファイルが存在しません: %s", old_filename)
            return False
        if os.path.exists(new_path):
            self.logger.warning("変更後のファイル名は既に存在します: %s", target_name)
            return False

        try:
            os.rename(old_path, new_path)
        except (OSError, ValueError) as e:
            self.logger.error("メモの名前変更に失敗しました: %s -> %s, %s", old_filename, target_name, e, exc_info=True)
            return False
        self.logger.info("メモの名前を変更しました: %s -> %s", old_filename, target_name)
        return True

    def load_data(self, identifier: str) -> Optional[Memo]:
        """BaseServiceから継承したメソッド。ファイルからメモを読み込む。

        Args:
            identifier (str): 読み込むファイル名。

        Returns:
            Optional[Memo]: 読み込まれたメモ。ファイルが存在しない場合や名前が不正な場合はNone。

        Raises:
            OSError: ファイルの読み込みに失敗した場合。
            UnicodeDecodeError: 内容がUTF-8として解釈できない場合。
        """
        path = self.storage_service.resolve_memo_path(identifier)
        if path is None:
            return None
        if not os.path.exists(path):
            self.logger.warning("ファイルが存在しません: %s", identifier)
            return None

        with open(path, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
        preview = content[:PREVIEW_LENGTH] + ("..." if len(content) > PREVIEW_LENGTH else "")
        self.logger.info("メモを読み込みました: %s (長さ: %d)", identifier, len(content))
        self.logger.debug("内容プレビュー: %s", preview)
        return Memo(filename=identifier, content=content)

    def save_data(self, data: Memo) -> None:
        """BaseServiceから継承したメソッド。メモをファイルに書き込む。

        Args:
            data (Memo): 保存するメモ。

        Raises:
            ValueError: ファイル名が不正な場合。
            OSError: 書き込みに失敗した場合。
        """
        path = self.storage_service.resolve_memo_path(data.filename)
        if path is None:
            raise ValueError(f"不正なファイル名です: {data.filename!r}")

        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(data.content)
        self.logger.info("メモを保存しました: %s (%d bytes)", path, os.path.getsize(path))
