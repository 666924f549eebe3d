"""classify_packages / open_input のテスト。

空行スキップ、原文保持、追加順、デコードエラーの行番号、
プロンプトエラーの伝播を検証する。
"""

from __future__ import annotations

import io
import os
from pathlib import Path

import pytest

from pkgsort.engine._classifier import (
    DEFAULT_SELECTION,
    SELECT_PROMPT,
    InputOpenError,
    LineDecodeError,
    classify_packages,
    open_input,
)
from pkgsort.engine._prompt import PromptError, ScriptedPrompter
from pkgsort.models.buckets import CategoryBuckets
from pkgsort.models.category import Category, category_labels

DEV = 0
DESKTOP = 1
ENTERTAINMENT = 2
CORE = 3
MISC = 4

_SKIP_PERMISSION = pytest.mark.skipif(
    os.name == "nt" or os.getuid() == 0,
    reason="POSIX permissions required and not running as root",
)


def _classify(
    data: bytes,
    selections: list[int],
    *,
    encoding: str = "utf-8",
) -> tuple[CategoryBuckets, ScriptedPrompter, list[str]]:
    """BytesIO 入力とスクリプトプロンプターで分類を実行する。"""
    prompter = ScriptedPrompter(selections)
    echoed: list[str] = []
    buckets = classify_packages(
        io.BytesIO(data), prompter, encoding=encoding, echo=echoed.append
    )
    return buckets, prompter, echoed


# =============================================================================
# 分類ループ
# =============================================================================


class TestClassifyBasicScenario:
    """pkgA / 空行 / pkgB を Dev, Misc に分類する。"""

    def test_assigns_selected_categories(self) -> None:
        buckets, _, _ = _classify(b"pkgA\n\npkgB\n", [DEV, MISC])
        assert buckets.packages(Category.DEV) == ("pkgA",)
        assert buckets.packages(Category.MISC) == ("pkgB",)
        assert buckets.total == 2

    def test_other_categories_empty(self) -> None:
        buckets, _, _ = _classify(b"pkgA\n\npkgB\n", [DEV, MISC])
        assert [c for c, _ in buckets.non_empty()] == [Category.DEV, Category.MISC]

    def test_prompted_once_per_non_blank_line(self) -> None:
        _, prompter, _ = _classify(b"pkgA\n\npkgB\n", [DEV, MISC])
        assert len(prompter.calls) == 2

    def test_prompt_shows_all_categories_with_first_as_default(self) -> None:
        _, prompter, _ = _classify(b"pkgA\n", [CORE])
        assert prompter.calls == [(SELECT_PROMPT, category_labels(), DEFAULT_SELECTION)]
        assert DEFAULT_SELECTION == 0

    def test_echoes_each_package(self) -> None:
        _, _, echoed = _classify(b"pkgA\n\npkgB\n", [DEV, MISC])
        assert echoed == ["\nPackage: pkgA", "\nPackage: pkgB"]


class TestClassifyBlankLines:
    """空白のみの行はプロンプトを出さずスキップする。"""

    def test_empty_input_no_prompts(self) -> None:
        buckets, prompter, echoed = _classify(b"", [])
        assert buckets.total == 0
        assert prompter.calls == []
        assert echoed == []

    def test_whitespace_only_lines_skipped(self) -> None:
        buckets, prompter, _ = _classify(b"   \n\t\n\r\n \t \n", [])
        assert buckets.total == 0
        assert prompter.calls == []

    def test_total_equals_non_blank_line_count(self) -> None:
        data = b"a\n\nb\n  \nc\nd\n"
        buckets, _, _ = _classify(data, [DEV, DESKTOP, DEV, ENTERTAINMENT])
        assert buckets.total == 4


class TestClassifyPreservesText:
    """改行以外は原文のまま保持する。"""

    def test_surrounding_whitespace_preserved(self) -> None:
        buckets, _, echoed = _classify(b"  vim  \n", [DEV])
        assert buckets.packages(Category.DEV) == ("  vim  ",)
        assert echoed == ["\nPackage:   vim  "]

    def test_crlf_terminator_removed(self) -> None:
        buckets, _, _ = _classify(b"vim\r\nemacs\r\n", [DEV, DEV])
        assert buckets.packages(Category.DEV) == ("vim", "emacs")

    def test_last_line_without_newline(self) -> None:
        buckets, _, _ = _classify(b"vim\nemacs", [DEV, CORE])
        assert buckets.packages(Category.CORE) == ("emacs",)

    def test_duplicates_not_removed(self) -> None:
        buckets, _, _ = _classify(b"git\ngit\n", [DEV, DEV])
        assert buckets.packages(Category.DEV) == ("git", "git")

    def test_non_ascii_names(self) -> None:
        buckets, _, _ = _classify("フォント\n".encode(), [DESKTOP])
        assert buckets.packages(Category.DESKTOP) == ("フォント",)


class TestClassifyOrder:
    """各バケット内の順序は選択順。"""

    def test_insertion_order_per_category(self) -> None:
        data = b"c1\nm1\nc2\nm2\nc3\n"
        buckets, _, _ = _classify(data, [CORE, MISC, CORE, MISC, CORE])
        assert buckets.packages(Category.CORE) == ("c1", "c2", "c3")
        assert buckets.packages(Category.MISC) == ("m1", "m2")


class TestClassifyEncoding:
    """デコード失敗は行番号付きで報告される。"""

    def test_invalid_utf8_reports_line_number(self) -> None:
        data = b"ok\n\nbad\xff\n"
        with pytest.raises(LineDecodeError, match="line 3") as exc_info:
            _classify(data, [DEV])
        assert exc_info.value.line_number == 3

    def test_blank_lines_count_towards_line_number(self) -> None:
        with pytest.raises(LineDecodeError) as exc_info:
            _classify(b"\n\n\n\xfe\n", [])
        assert exc_info.value.line_number == 4

    def test_lines_before_failure_were_prompted(self) -> None:
        prompter = ScriptedPrompter([DEV])
        with pytest.raises(LineDecodeError):
            classify_packages(io.BytesIO(b"ok\n\xff\n"), prompter, echo=lambda _: None)
        assert len(prompter.calls) == 1

    def test_alternative_encoding(self) -> None:
        buckets, _, _ = _classify("café\n".encode("latin-1"), [MISC], encoding="latin-1")
        assert buckets.packages(Category.MISC) == ("café",)


class TestClassifyPromptErrors:
    """プロンプト層の失敗は分類全体を中断する。"""

    def test_prompt_error_propagates(self) -> None:
        with pytest.raises(PromptError):
            _classify(b"a\nb\n", [DEV])

    def test_out_of_range_selection_raises_prompt_error(self) -> None:
        with pytest.raises(PromptError, match="Invalid selection 7 for line 2"):
            _classify(b"\na\n", [7])


# =============================================================================
# open_input
# =============================================================================


class TestOpenInput:
    """入力ファイルのオープン。"""

    def test_opens_existing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "packages.txt"
        path.write_bytes(b"vim\n")
        with open_input(path) as f:
            assert f.read() == b"vim\n"

    def test_missing_file_names_path(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.txt"
        with pytest.raises(InputOpenError, match="missing.txt"):
            open_input(path)

    def test_directory_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(InputOpenError, match="Failed to open input file"):
            open_input(tmp_path)

    @_SKIP_PERMISSION
    def test_unreadable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "secret.txt"
        path.write_bytes(b"vim\n")
        path.chmod(0o000)
        try:
            with pytest.raises(InputOpenError, match="secret.txt"):
                open_input(path)
        finally:
            path.chmod(0o644)
