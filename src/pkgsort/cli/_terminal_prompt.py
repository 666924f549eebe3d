"""TerminalCategoryPrompter — 端末向けカテゴリ選択プロンプト。

番号付きの選択肢一覧を Rich で stderr に描画し、番号入力を typer.prompt で受け付ける。
stdin が TTY でない場合は入力を待たずに PromptError を送出する。
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

import click
import typer
from rich.console import Console
from rich.text import Text

from pkgsort.engine._prompt import PromptError

_DEFAULT_MARKER = "❯"


class TerminalCategoryPrompter:
    """端末で番号を入力させる CategoryPrompter 実装。

    表示は 1 始まり、戻り値は 0 始まり。
    """

    def __init__(
        self,
        console: Console | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self._console: Console = console or Console(file=sys.stderr)
        self._stdin = stdin

    def _is_interactive(self) -> bool:
        stdin = self._stdin if self._stdin is not None else sys.stdin
        try:
            return stdin.isatty()
        except (AttributeError, ValueError):
            # 閉じられたストリームや isatty を持たない代替オブジェクト
            return False

    def render(self, prompt: str, choices: Sequence[str], default: int) -> Text:
        """選択肢一覧を描画用の Text に組み立てる。"""
        text = Text()
        text.append(f"{prompt}:\n", style="bold")
        for index, label in enumerate(choices):
            number = f"{index + 1})"
            if index == default:
                text.append(f"  {_DEFAULT_MARKER} {number} {label}\n", style="bold cyan")
            else:
                text.append(f"    {number} {label}\n")
        return text

    def select(self, prompt: str, choices: Sequence[str], default: int = 0) -> int:
        """番号入力で選択肢を1つ選ばせ、ゼロ始まりの位置を返す。

        Raises:
            PromptError: 非対話端末の場合、選択肢が空の場合、入力が中断された場合。
        """
        if not choices:
            raise PromptError("No choices to select from")
        if not self._is_interactive():
            raise PromptError(
                "No interactive terminal available for category selection. "
                "Run pkgsort from a terminal."
            )

        self._console.print(self.render(prompt, choices, default), end="")
        try:
            number: int = typer.prompt(
                "Choice",
                default=default + 1,
                type=click.IntRange(1, len(choices)),
                err=True,
            )
        except click.Abort:
            raise PromptError("Category selection aborted") from None
        return number - 1
