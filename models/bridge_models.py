# models/bridge_models.py
"""
ページ（JavaScript）とメモリポジトリの間でやり取りするリクエスト／レスポンスの型定義。

ページからは {"method": "...", "params": {...}} 形式のJSONが送られ、
parse_request によって対応するリクエスト型に変換されます。
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union


class BridgeRequestError(ValueError):
    """ブリッジに渡されたリクエストが不正な場合に送出される例外。"""


@dataclass
class SaveMemoRequest:
    """saveMemo 呼び出し。filename が空または None の場合はタイムスタンプ名で保存する。"""
    content: Optional[str] = None
    filename: Optional[str] = None


@dataclass
class GetMemoListRequest:
    """getMemoList 呼び出し。引数なし。"""


@dataclass
class LoadMemoRequest:
    """loadMemo 呼び出し。"""
    filename: str


@dataclass
class DeleteMemoRequest:
    """deleteMemo 呼び出し。"""
    filename: str


@dataclass
class RenameMemoRequest:
    """renameMemo 呼び出し。new_filename は拡張子を含まない。"""
    old_filename: str
    new_filename: str


BridgeRequest = Union[
    SaveMemoRequest,
    GetMemoListRequest,
    LoadMemoRequest,
    DeleteMemoRequest,
    RenameMemoRequest,
]


@dataclass
class SaveMemoResponse:
    def to_result(self) -> None:
        return None


@dataclass
class MemoListResponse:
    filenames: List[str] = field(default_factory=list)

    def to_result(self) -> List[str]:
        return list(self.filenames)


@dataclass
class LoadMemoResponse:
    content: str = ""

    def to_result(self) -> str:
        return self.content


@dataclass
class DeleteMemoResponse:
    success: bool = False

    def to_result(self) -> bool:
        return self.success


@dataclass
class RenameMemoResponse:
    success: bool = False

    def to_result(self) -> bool:
        return self.success


BridgeResponse = Union[
    SaveMemoResponse,
    MemoListResponse,
    LoadMemoResponse,
    DeleteMemoResponse,
    RenameMemoResponse,
]


def _require_str(params: Dict[str, Any], key: str) -> str:
    """必須の文字列パラメータを取り出す。"""
    if key not in params:
        raise BridgeRequestError(f"パラメータ '{key}' がありません")
    value = params[key]
    if not isinstance(value, str):
        raise BridgeRequestError(f"パラメータ '{key}' は文字列である必要があります")
    return value


def _optional_str(params: Dict[str, Any], key: str) -> Optional[str]:
    """省略可能な文字列パラメータを取り出す。"""
    value = params.get(key)
    if value is not None and not isinstance(value, str):
        raise BridgeRequestError(f"パラメータ '{key}' は文字列である必要があります")
    return value


_PARSERS: Dict[str, Callable[[Dict[str, Any]], BridgeRequest]] = {
    "saveMemo": lambda p: SaveMemoRequest(
        content=_optional_str(p, "content"),
        filename=_optional_str(p, "filename"),
    ),
    "getMemoList": lambda p: GetMemoListRequest(),
    "loadMemo": lambda p: LoadMemoRequest(filename=_require_str(p, "filename")),
    "deleteMemo": lambda p: DeleteMemoRequest(filename=_require_str(p, "filename")),
    "renameMemo": lambda p: RenameMemoRequest(
        old_filename=_require_str(p, "oldFilename"),
        new_filename=_require_str(p, "newFilename"),
    ),
}

METHOD_NAMES = tuple(_PARSERS)


def parse_request(payload: Any) -> BridgeRequest:
    """ページから受け取ったデコード済みJSONをリクエスト型に変換する。

    Args:
        payload (Any): {"method": str, "params": dict} 形式のデータ。

    Returns:
        BridgeRequest: 対応するリクエストオブジェクト。

    Raises:
        BridgeRequestError: 形式が不正、または未知のメソッド名の場合。
    """
    if not isinstance(payload, dict):
        raise BridgeRequestError("リクエストはJSONオブジェクトである必要があります")

    method = payload.get("method")
    parser = _PARSERS.get(method) if isinstance(method, str) else None
    if parser is None:
        raise BridgeRequestError(
            f"未知のメソッドです: {method!r}（利用可能: {', '.join(METHOD_NAMES)}）"
        )

    params = payload.get("params")
    if params is None:
        params = {}
    if not isinstance(params, dict):
        raise BridgeRequestError("params はJSONオブジェクトである必要があります")

    return parser(params)
