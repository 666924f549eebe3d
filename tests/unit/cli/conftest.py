"""CLI テスト共通フィクスチャ・ヘルパー。"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from pkgsort.config._resolver import filter_cli_overrides
from pkgsort.engine import ScriptedPrompter
from pkgsort.models.config import PkgsortConfig

PATCH_RESOLVE_CONFIG = "pkgsort.cli._app.resolve_config"
PATCH_PROMPTER = "pkgsort.cli._app.TerminalCategoryPrompter"


def _resolve_from_cli_only(
    start_dir: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> PkgsortConfig:
    """ユーザー設定や pyproject.toml を読まずに CLI 値とデフォルトのみで解決する。"""
    return PkgsortConfig(**filter_cli_overrides(cli_overrides or {}))  # type: ignore[arg-type]


@pytest.fixture(autouse=True)
def _isolate_config() -> Iterator[None]:
    """テストが実環境の設定ファイルに影響されることを防止する。"""
    with patch(PATCH_RESOLVE_CONFIG, side_effect=_resolve_from_cli_only):
        yield


@pytest.fixture
def use_selections(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[list[int]], ScriptedPrompter]:
    """端末プロンプターを ScriptedPrompter に差し替える関数を返す。"""

    def install(selections: list[int]) -> ScriptedPrompter:
        prompter = ScriptedPrompter(selections)
        monkeypatch.setattr(PATCH_PROMPTER, lambda: prompter)
        return prompter

    return install


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[bytes], Path]:
    """tmp_path に入力ファイルを作成する関数を返す。"""

    def write(content: bytes) -> Path:
        path = tmp_path / "packages.txt"
        path.write_bytes(content)
        return path

    return write
