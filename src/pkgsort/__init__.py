"""pkgsort — パッケージ名の一覧を対話的にカテゴリ別ファイルへ振り分ける CLI。

サブパッケージ:
    models: カテゴリ・バケット・設定・終了コードのドメインモデル
    config: 階層的な設定解決
    engine: 分類ループ、プロンプターインターフェース、出力ファイル書き出し
    cli: Typer アプリケーションと端末プロンプター
"""

from pkgsort.cli import main

__all__ = ["main"]
