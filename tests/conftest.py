import datetime
import os

import pytest

from services.memo_bridge import MemoBridge
from services.memo_service import MemoService
from services.storage_service import StorageService

FIXED_NOW = datetime.datetime(2024, 5, 6, 7, 8, 9)


@pytest.fixture
def memo_dir(tmp_path) -> str:
    """テスト用のメモディレクトリ（まだ作成されていない入れ子のパス）。"""
    return os.path.join(str(tmp_path), "MemoApp", "memos")


@pytest.fixture
def storage_service(memo_dir) -> StorageService:
    return StorageService(base_path=memo_dir)


@pytest.fixture
def memo_service(storage_service) -> MemoService:
    return MemoService(storage_service=storage_service, clock=lambda: FIXED_NOW)


@pytest.fixture
def memo_bridge(memo_service) -> MemoBridge:
    return MemoBridge(memo_service)

