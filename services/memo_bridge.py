# services/memo_bridge.py
"""
ページとメモリポジトリを仲介するブリッジ。

ページ側はメソッド名とパラメータをJSONで送り、型付きのリクエストに変換された上で
MemoService の各操作へ振り分けられます。結果は {"ok": true, "result": ...} 形式の
JSONとして返され、不正なリクエストは {"ok": false, "error": "..."} になります。
"""
import json
import logging
from typing import Any, Dict, List, Optional

from models.bridge_models import (
    BridgeRequest,
    BridgeRequestError,
    BridgeResponse,
    DeleteMemoRequest,
    DeleteMemoResponse,
    GetMemoListRequest,
    LoadMemoRequest,
    LoadMemoResponse,
    MemoListResponse,
    RenameMemoRequest,
    RenameMemoResponse,
    SaveMemoRequest,
    SaveMemoResponse,
    parse_request,
)
from .memo_service import MemoService


class MemoBridge:
    """ブリッジ呼び出しを MemoService に振り分けるクラス。

    Attributes:
        memo_service (MemoService): 実際のファイル操作を行うサービス。
    """

    def __init__(self, memo_service: Optional[MemoService] = None, logger: Optional[logging.Logger] = None) -> None:
        self.memo_service = memo_service or MemoService()
        self.logger = logger or logging.getLogger(__name__)

    def handle(self, request: BridgeRequest) -> BridgeResponse:
        """型付きリクエストを処理し、対応するレスポンスを返す。

        Args:
            request (BridgeRequest): 処理するリクエスト。

        Returns:
            BridgeResponse: 処理結果。

        Raises:
            BridgeRequestError: 未対応のリクエスト型の場合。
        """
        service = self.memo_service
        if isinstance(request, SaveMemoRequest):
            service.save_memo(request.content, request.filename)
            return SaveMemoResponse()
        if isinstance(request, GetMemoListRequest):
            return MemoListResponse(filenames=service.list_memos())
        if isinstance(request, LoadMemoRequest):
            return LoadMemoResponse(content=service.load_memo(request.filename))
        if isinstance(request, DeleteMemoRequest):
            return DeleteMemoResponse(success=service.delete_memo(request.filename))
        if isinstance(request, RenameMemoRequest):
            return RenameMemoResponse(success=service.rename_memo(request.old_filename, request.new_filename))
        raise BridgeRequestError(f"未対応のリクエストです: {type(request).__name__}")

    def handle_json(self, payload: str) -> str:
        """ページから受け取ったJSON文字列を処理し、JSON文字列で結果を返す。

        Args:
            payload (str): {"method": str, "params": dict} 形式のJSON文字列。

        Returns:
            str: 結果のエンベロープをJSON化した文字列。
        """
        try:
            request = parse_request(json.loads(payload))
            response = self.handle(request)
        except (ValueError, TypeError) as e:
            self.logger.warning("ブリッジ呼び出しが不正です: %s", e)
            return self._dump({"ok": False, "error": str(e)})

        self.logger.debug("ブリッジ呼び出し: %s", type(request).__name__)
        return self._dump({"ok": True, "result": response.to_result()})

    @staticmethod
    def _dump(envelope: Dict[str, Any]) -> str:
        return json.dumps(envelope, ensure_ascii=False)

    # --- 名前付きの呼び出し ---

    def save_memo(self, content: Optional[str], filename: Optional[str] = None) -> None:
        self.handle(SaveMemoRequest(content=content, filename=filename))

    def get_memo_list(self) -> str:
        """メモ一覧をJSON配列の文字列として返す。例: ["a.txt","b.txt"]"""
        filenames: List[str] = self.handle(GetMemoListRequest()).to_result()
        serialized = json.dumps(filenames, ensure_ascii=False, separators=(",", ":"))
        self.logger.info("メモ一覧を返却: %s", serialized)
        return serialized

    def load_memo(self, filename: str) -> str:
        return self.handle(LoadMemoRequest(filename=filename)).to_result()

    def delete_memo(self, filename: str) -> bool:
        return self.handle(DeleteMemoRequest(filename=filename)).to_result()

    def rename_memo(self, old_filename: str, new_filename: str) -> bool:
        return self.handle(RenameMemoRequest(old_filename=old_filename, new_filename=new_filename)).to_result()
