"""設定管理モデル。"""

from __future__ import annotations

import codecs
from typing import Final

from pydantic import Field, field_validator

from pkgsort.models._base import PkgsortBaseModel

DEFAULT_OUTPUT_DIR: Final[str] = "."
DEFAULT_ENCODING: Final[str] = "utf-8"


class PkgsortConfig(PkgsortBaseModel):
    """全設定項目を統合した不変モデル。

    デフォルト値のみで有効なインスタンスを構築可能。
    """

    # 出力設定
    output_dir: str = Field(default=DEFAULT_OUTPUT_DIR, min_length=1)

    # 入出力ファイルのテキストエンコーディング
    encoding: str = Field(default=DEFAULT_ENCODING, min_length=1)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Python が認識し、改行を単一の 0x0A バイトで表すコーデックか検証する。

        入力は改行バイトで行分割してから行ごとにデコードするため、
        utf-16 / utf-32 のような多バイト改行のエンコーディングは扱えない。
        """
        try:
            codecs.lookup(v)
            newline = "\n".encode(v)
        except LookupError:
            raise ValueError(f"Unknown encoding '{v}'") from None
        if newline != b"\n":
            raise ValueError(
                f"Unsupported encoding '{v}': "
                "newline must be encoded as a single 0x0A byte"
            )
        return v
