"""
アプリケーションのエントリーポイント。

このスクリプトは、設定とログ出力を初期化し、メモを保存するディレクトリを用意した上で
PyQt6アプリケーションとメインウィンドウを生成・表示して、イベントループを開始します。
また、プロジェクトのルートディレクトリをPythonのパスに追加し、
他のモジュール（ui, servicesなど）を正しくインポートできるように設定します。
"""
import sys
import os

# このファイル(main.py)があるディレクトリの絶対パスを取得し、
# Pythonがモジュールを探しに行く場所のリスト（sys.path）に追加します。
current_dir: str = os.path.dirname(os.path.abspath(__file__))
if current_dir not in sys.path:
    sys.path.append(current_dir)

from PyQt6.QtWidgets import QApplication

from services.memo_bridge import MemoBridge
from services.memo_service import MemoService
from services.storage_service import StorageService
from ui.main_window import MainWindow
from utils.app_config import AppConfig, load_config
from utils.logging_utils import setup_logging


def build_bridge(config: AppConfig) -> MemoBridge:
    """設定に従ってストレージ・サービス・ブリッジを組み立てる。"""
    storage_service = StorageService(base_path=config.memo_dir)
    return MemoBridge(MemoService(storage_service=storage_service))


def main() -> int:
    config = load_config()
    setup_logging(config.log_level)

    # 1. PyQtアプリケーションインスタンスを作成します。
    app: QApplication = QApplication(sys.argv)

    # 2. メインウィンドウを生成して表示します。
    window: MainWindow = MainWindow(build_bridge(config), config)
    window.show()

    # 3. イベントループを開始し、終了コードを返します。
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
