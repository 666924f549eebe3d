"""パッケージ分類カテゴリの正規定義。

カテゴリは閉じた5値の列挙であり、実行時に追加・変更されない。
定義順がそのまま対話プロンプトの番号順と出力ファイルの書き出し順になる。
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

FILENAME_SUFFIX: Final[str] = ".txt"
"""出力ファイル名の拡張子。"""


class Category(StrEnum):
    """パッケージの分類先カテゴリ。

    値は表示ラベルと出力ファイル名の両方に使う安定識別子。
    """

    DEV = "dev"
    DESKTOP = "desktop"
    ENTERTAINMENT = "entertainment"
    CORE = "core"
    MISC = "misc"

    @classmethod
    def ordered(cls) -> tuple[Category, ...]:
        """レジストリ順（定義順）の全カテゴリを返す。"""
        return tuple(cls)

    @classmethod
    def from_index(cls, index: int) -> Category:
        """ゼロ始まりの位置からカテゴリを返す。

        Raises:
            IndexError: 範囲外の位置（負数を含む）が指定された場合。
        """
        ordered = cls.ordered()
        if not 0 <= index < len(ordered):
            raise IndexError(
                f"Category index {index} out of range (0-{len(ordered) - 1})"
            )
        return ordered[index]

    @property
    def label(self) -> str:
        """プロンプトに表示するラベル。"""
        return self.value

    @property
    def filename(self) -> str:
        """出力ファイル名（``<identifier>.txt``）。"""
        return f"{self.value}{FILENAME_SUFFIX}"


def category_labels() -> tuple[str, ...]:
    """レジストリ順の表示ラベル一覧を返す。"""
    return tuple(category.label for category in Category.ordered())
