"""CategoryPrompter — 単一選択プロンプトのプロトコル。

分類ループはこのプロトコルにのみ依存し、端末描画やキー入力の詳細を知らない。
端末実装は cli._terminal_prompt、スクリプト実装は本モジュールの ScriptedPrompter。
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable


class PromptError(Exception):
    """対話選択の失敗。非対話端末、入力中断、不正な選択結果等。"""


@runtime_checkable
class CategoryPrompter(Protocol):
    """N 個のラベル付き選択肢から1つを選ばせるプロトコル。"""

    def select(self, prompt: str, choices: Sequence[str], default: int = 0) -> int:
        """選択肢を提示し、ユーザーが選ぶまでブロックする。

        Args:
            prompt: 選択肢の前に表示する問いかけ。
            choices: 表示順の選択肢ラベル。
            default: 既定で強調表示する選択肢のゼロ始まり位置。

        Returns:
            選ばれた選択肢のゼロ始まり位置。

        Raises:
            PromptError: 対話端末が利用できない、または入力が中断された場合。
        """
        ...


class ScriptedPrompter:
    """事前に与えた選択位置を順に返すプロンプター。

    テストや非対話ドライバーから分類ループを駆動するために使う。
    呼び出しごとの (prompt, choices, default) を calls に記録する。
    """

    def __init__(self, selections: Iterable[int]) -> None:
        self._selections = list(selections)
        self.calls: list[tuple[str, tuple[str, ...], int]] = []

    def select(self, prompt: str, choices: Sequence[str], default: int = 0) -> int:
        """次の選択位置を返す。スクリプトが尽きたら PromptError。"""
        self.calls.append((prompt, tuple(choices), default))
        if len(self.calls) > len(self._selections):
            raise PromptError(
                f"No scripted selection left for prompt #{len(self.calls)}"
            )
        return self._selections[len(self.calls) - 1]

    @property
    def remaining(self) -> int:
        """未使用の選択位置の数。"""
        return max(len(self._selections) - len(self.calls), 0)
