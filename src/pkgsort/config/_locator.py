"""設定ファイル探索。

pyproject.toml のカレント→親探索と、ユーザーグローバル設定パスの解決。
"""

from __future__ import annotations

import stat as stat_module
from pathlib import Path

_CONFIG_FILE_NAME: str = "config.toml"
_PYPROJECT_FILE_NAME: str = "pyproject.toml"


def find_pyproject_toml(start: Path) -> Path | None:
    """start ディレクトリから親方向に pyproject.toml を探索する。

    通常ファイルのみを対象とし、同名ディレクトリは無視する。

    Args:
        start: 探索開始ディレクトリ。

    Returns:
        最初に見つかった pyproject.toml のフルパス。見つからなければ None。

    Raises:
        OSError: 探索パス上のアクセス権限エラー等。
    """
    current = start.resolve()
    while True:
        candidate = current / _PYPROJECT_FILE_NAME
        try:
            st = candidate.stat()
        except FileNotFoundError:
            pass
        else:
            if stat_module.S_ISREG(st.st_mode):
                return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def get_user_config_path() -> Path:
    """ユーザーグローバル設定ファイルのパスを返す。

    ~/.config/pkgsort/config.toml を固定パスとして返す（存在チェックは行わない）。

    Raises:
        RuntimeError: ホームディレクトリを特定できない場合。
    """
    return Path.home() / ".config" / "pkgsort" / _CONFIG_FILE_NAME
