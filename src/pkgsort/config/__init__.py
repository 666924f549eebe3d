"""設定管理モジュール。"""

from pkgsort.config._resolver import resolve_config

__all__ = [
    "resolve_config",
]
