# ui/main_window.py
import logging
import os
from typing import Optional

from PyQt6.QtCore import QUrl
from PyQt6.QtWebChannel import QWebChannel
from PyQt6.QtWebEngineWidgets import QWebEngineView
from PyQt6.QtWidgets import QMainWindow, QWidget

from services.memo_bridge import MemoBridge
from ui.web_bridge import WebBridge
from utils.app_config import AppConfig
from utils.constants import BRIDGE_OBJECT_NAME, MEMO_PAGE_PATH

logger = logging.getLogger(__name__)

MISSING_PAGE_HTML = """<!DOCTYPE html>
<html><body style="font-family: sans-serif; padding: 16px;">
<h3>ページを読み込めませんでした</h3>
<p>memo.html が見つかりません。ログを確認してください。</p>
</body></html>"""


class MainWindow(QMainWindow):
    """
    メモ帳ページを表示するメインウィンドウ。

    QWebEngineView にページを読み込み、QWebChannel に WebBridge を登録して
    ページから MemoBridge を呼び出せるようにします。
    """

    def __init__(
        self,
        memo_bridge: MemoBridge,
        config: Optional[AppConfig] = None,
        page_path: str = MEMO_PAGE_PATH,
        parent: Optional[QWidget] = None
    ) -> None:
        """
        MainWindowのコンストラクタ。

        Args:
            memo_bridge (MemoBridge): ページからの呼び出しを処理するブリッジ。
            config (Optional[AppConfig]): ウィンドウのタイトルやサイズの設定。
            page_path (str): 読み込むHTMLファイルのパス。
            parent (Optional[QWidget]): 親ウィジェット。
        """
        super().__init__(parent)
        config = config or AppConfig()
        self.setWindowTitle(config.window_title)
        self.resize(config.window_width, config.window_height)

        # --- UI要素の型定義 ---
        self.web_view: QWebEngineView = QWebEngineView(self)
        self.channel: QWebChannel = QWebChannel(self)
        self.web_bridge: WebBridge = WebBridge(memo_bridge, self)

        self.channel.registerObject(BRIDGE_OBJECT_NAME, self.web_bridge)
        self.web_view.page().setWebChannel(self.channel)
        self.setCentralWidget(self.web_view)

        self.web_view.loadStarted.connect(self.on_load_started)
        self.web_view.loadFinished.connect(self.on_load_finished)
        self.load_page(page_path)

    def load_page(self, page_path: str) -> None:
        """HTMLファイルを読み込む。見つからない場合はエラーページを表示する。"""
        if not os.path.isfile(page_path):
            logger.error("HTMLファイルが見つかりません: %s", page_path)
            self.web_view.setHtml(MISSING_PAGE_HTML)
            return
        url = QUrl.fromLocalFile(os.path.abspath(page_path))
        logger.info("HTMLファイルを読み込みます: %s", url.toString())
        self.web_view.load(url)

    def on_load_started(self) -> None:
        logger.debug("ページの読み込みを開始しました")

    def on_load_finished(self, ok: bool) -> None:
        """ページの読み込み完了時に結果をログに記録する。"""
        if ok:
            logger.info("ページの読み込みが完了しました（ブリッジ名: %s）", BRIDGE_OBJECT_NAME)
        else:
            logger.error("ページの読み込みに失敗しました")
