"""Classifier — 入力行ごとの対話分類ループ。

入力を1行ずつ読み、空白のみでない行ごとにカテゴリを選ばせて
CategoryBuckets に蓄積する。出力は行わない（_writer.py が担当）。
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import BinaryIO, Final

from pkgsort.engine._prompt import CategoryPrompter, PromptError
from pkgsort.models.buckets import CategoryBuckets
from pkgsort.models.category import Category, category_labels

logger = logging.getLogger(__name__)

SELECT_PROMPT: Final[str] = "Select category"
"""カテゴリ選択プロンプトの問いかけ文。"""

DEFAULT_SELECTION: Final[int] = 0
"""既定で強調表示する選択肢（レジストリ先頭）。"""


class InputOpenError(Exception):
    """入力ファイルを開けない。不在、ディレクトリ、権限なし等。"""


class LineDecodeError(Exception):
    """入力行のデコードに失敗した。"""

    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        super().__init__(f"Error reading line {line_number}: {reason}")


def open_input(path: Path) -> BinaryIO:
    """入力ファイルをバイナリモードで開く。

    デコードは行単位で classify_packages が行うため、失敗行を正確に特定できる。

    Raises:
        InputOpenError: ファイルを開けない場合。メッセージにパスを含む。
    """
    try:
        return path.open("rb")
    except OSError as e:
        reason = e.strerror or type(e).__name__
        raise InputOpenError(
            f"Failed to open input file: {path} ({reason})"
        ) from e


def _strip_line_terminator(line: str) -> str:
    """行末の改行（\\n または \\r\\n）のみを除去する。"""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def classify_packages(
    source: Iterable[bytes],
    prompter: CategoryPrompter,
    *,
    encoding: str = "utf-8",
    echo: Callable[[str], object] = print,
) -> CategoryBuckets:
    """入力行を対話的に分類し、カテゴリ別に蓄積する。

    空白のみの行はプロンプトを出さずにスキップする。
    それ以外の行は改行のみを除いた原文のまま表示・蓄積する。

    Args:
        source: 改行付きバイト列を1行ずつ返す入力（バイナリモードのファイル等）。
        prompter: カテゴリ選択に使うプロンプター。
        encoding: 行のデコードに使うエンコーディング。
        echo: 分類中のパッケージ名を表示する関数。

    Returns:
        全カテゴリを含む CategoryBuckets。

    Raises:
        LineDecodeError: 行のデコードに失敗した場合。
        PromptError: 選択に失敗した場合、または範囲外の位置が返された場合。
    """
    buckets = CategoryBuckets()
    labels = category_labels()

    for line_number, raw in enumerate(source, start=1):
        try:
            decoded = raw.decode(encoding)
        except UnicodeDecodeError as e:
            raise LineDecodeError(line_number, str(e)) from e

        package = _strip_line_terminator(decoded)
        if not package.strip():
            logger.debug("Skipping blank line %d", line_number)
            continue

        echo(f"\nPackage: {package}")
        selection = prompter.select(SELECT_PROMPT, labels, default=DEFAULT_SELECTION)
        try:
            category = Category.from_index(selection)
        except IndexError as e:
            raise PromptError(
                f"Invalid selection {selection} for line {line_number}"
            ) from e

        buckets.add(category, package)
        logger.debug("Line %d classified as %s", line_number, category.value)

    return buckets
