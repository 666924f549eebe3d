"""ExitCode — 終了コードの定義。"""

from enum import IntEnum


class ExitCode(IntEnum):
    """プロセス終了コード。

    0 は正常終了。1-4 はエラー分類（セットアップ・入力・対話・出力）に対応する。
    """

    SUCCESS = 0
    SETUP_ERROR = 1
    INPUT_ERROR = 2
    INTERACTION_ERROR = 3
    OUTPUT_ERROR = 4
