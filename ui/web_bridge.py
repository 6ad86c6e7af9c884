# ui/web_bridge.py
from typing import Optional

from PyQt6.QtCore import QObject, pyqtSlot

from services.memo_bridge import MemoBridge


class WebBridge(QObject):
    """
    QWebChannel を通じてページに公開されるオブジェクト。

    ページからはメソッド名を動的に参照せず、call スロットひとつだけを呼び出します。
    リクエストとレスポンスはどちらもJSON文字列で、解釈は MemoBridge が行います。
    """

    def __init__(self, memo_bridge: MemoBridge, parent: Optional[QObject] = None) -> None:
        """
        WebBridgeのコンストラクタ。

        Args:
            memo_bridge (MemoBridge): リクエストを処理するブリッジ。
            parent (Optional[QObject]): 親オブジェクト。
        """
        super().__init__(parent)
        self.memo_bridge: MemoBridge = memo_bridge

    @pyqtSlot(str, result=str)
    def call(self, payload: str) -> str:
        """ページからの呼び出しを処理し、結果のJSON文字列を返す。"""
        return self.memo_bridge.handle_json(payload)
