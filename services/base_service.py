# services/base_service.py
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from .storage_service import StorageService

# データモデルを表すジェネリック型を定義
T = TypeVar('T')


class BaseService(Generic[T], ABC):
    """
    すべてのサービスクラスの基底となる抽象クラス（ABC）。

    データロードとセーブの共通インターフェースを定義します。
    具象サービスクラスは、特定のデータモデル（例: Memo）を扱うために、
    このクラスを継承し、抽象メソッドを実装する必要があります。

    Attributes:
        storage_service (Optional['StorageService']): ローカルストレージサービスへの参照。
        logger (logging.Logger): 診断情報の出力先。テストから差し替え可能です。
    """

    def __init__(
        self,
        storage_service: Optional['StorageService'] = None,
        logger: Optional[logging.Logger] = None
    ) -> None:
        """BaseServiceのコンストラクタ。

        Args:
            storage_service (Optional[StorageService]): ストレージサービスインスタンス。
            logger (Optional[logging.Logger]): 使用するロガー。省略時は具象クラスのモジュールロガー。
        """
        self.storage_service = storage_service
        self.logger = logger or logging.getLogger(type(self).__module__)

    @abstractmethod
    def load_data(self, identifier: Any) -> Optional[T]:
        """
        指定された識別子を使用してデータを読み込むための抽象メソッド。

        Args:
            identifier (Any): データを一意に識別するためのキー（例: ファイル名）。

        Returns:
            Optional[T]: 読み込まれたデータモデルオブジェクト。見つからない場合はNone。
        """

    @abstractmethod
    def save_data(self, data: T) -> None:
        """
        データを永続化するための抽象メソッド。

        Args:
            data (T): 保存するデータモデルオブジェクト。
        """
