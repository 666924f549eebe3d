"""OutputWriter — カテゴリ別ファイルの書き出し。

空でないバケットごとに <output_dir>/<category>.txt を作成（既存なら上書き）し、
1行1パッケージ名で追加順に書き出す。途中で失敗した場合、それ以前に
書き出したファイルはそのまま残る。
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from pkgsort.models._base import PkgsortBaseModel
from pkgsort.models.buckets import CategoryBuckets
from pkgsort.models.category import Category

logger = logging.getLogger(__name__)


class OutputDirError(Exception):
    """出力ディレクトリを作成できない。"""


class OutputWriteError(Exception):
    """出力ファイルの作成または書き込みに失敗した。"""


class WrittenFile(PkgsortBaseModel):
    """書き出し済みファイルの記録。

    Attributes:
        category: 書き出したカテゴリ。
        path: 出力ファイルのパス。
        count: 書き出したパッケージ数。
    """

    category: Category
    path: Path
    count: int


def ensure_output_dir(path: Path) -> Path:
    """出力ディレクトリを中間ディレクトリも含めて作成する。

    既に存在する場合は何もしない。

    Returns:
        解決済みの出力ディレクトリパス。

    Raises:
        OutputDirError: 作成できない場合、またはディレクトリ以外が存在する場合。
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except FileExistsError as e:
        raise OutputDirError(
            f"Output path exists and is not a directory: {path}"
        ) from e
    except OSError as e:
        reason = e.strerror or type(e).__name__
        raise OutputDirError(
            f"Failed to create output directory: {path} ({reason})"
        ) from e
    return path.resolve()


def _write_packages(path: Path, packages: tuple[str, ...], encoding: str) -> None:
    """パッケージ名を1行ずつ書き出す。既存ファイルは切り詰める。"""
    try:
        with path.open("w", encoding=encoding, newline="\n") as f:
            for package in packages:
                f.write(f"{package}\n")
    except (OSError, UnicodeEncodeError) as e:
        reason = getattr(e, "strerror", None) or str(e)
        raise OutputWriteError(
            f"Failed to write output file: {path} ({reason})"
        ) from e


def write_buckets(
    buckets: CategoryBuckets,
    output_dir: Path,
    *,
    encoding: str = "utf-8",
    on_written: Callable[[WrittenFile], object] | None = None,
) -> list[WrittenFile]:
    """空でないバケットをレジストリ順にファイルへ書き出す。

    空バケットのカテゴリはファイルを作成しない。

    Args:
        buckets: 分類結果。
        output_dir: 出力先ディレクトリ（存在している必要がある）。
        encoding: 出力ファイルのエンコーディング。
        on_written: 各ファイル書き出し直後に呼ばれるコールバック。

    Returns:
        書き出したファイルの記録（レジストリ順）。

    Raises:
        OutputWriteError: ファイルの作成・書き込みに失敗した場合。
            以降のカテゴリは書き出さない。
    """
    written: list[WrittenFile] = []
    for category, packages in buckets.non_empty():
        path = output_dir / category.filename
        if path.exists():
            logger.info("Overwriting existing file %s", path)
        _write_packages(path, packages, encoding)

        record = WrittenFile(category=category, path=path, count=len(packages))
        logger.debug("Wrote %d packages for %s", record.count, category.value)
        written.append(record)
        if on_written is not None:
            on_written(record)
    return written


def format_written(record: WrittenFile) -> str:
    """書き出し結果の進捗行を整形する。"""
    return f"Wrote {record.count} packages to {record.path}"
