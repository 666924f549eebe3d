"""CategoryBuckets — カテゴリごとのパッケージ名蓄積構造。"""

from __future__ import annotations

from collections.abc import Iterator

from pkgsort.models.category import Category


class CategoryBuckets:
    """カテゴリ → パッケージ名リストの固定マッピング。

    構築時に全カテゴリを空リストで初期化するため、参照が失敗することはない。
    各バケット内の順序は追加順を保持する。
    """

    def __init__(self) -> None:
        self._buckets: dict[Category, list[str]] = {
            category: [] for category in Category.ordered()
        }

    def add(self, category: Category, package: str) -> None:
        """パッケージ名を指定カテゴリのバケット末尾に追加する。"""
        self._buckets[category].append(package)

    def packages(self, category: Category) -> tuple[str, ...]:
        """指定カテゴリのパッケージ名を追加順で返す。"""
        return tuple(self._buckets[category])

    def items(self) -> Iterator[tuple[Category, tuple[str, ...]]]:
        """レジストリ順に (カテゴリ, パッケージ名タプル) を列挙する。空バケットも含む。"""
        for category in Category.ordered():
            yield category, tuple(self._buckets[category])

    def non_empty(self) -> Iterator[tuple[Category, tuple[str, ...]]]:
        """レジストリ順に空でないバケットのみを列挙する。"""
        for category, packages in self.items():
            if packages:
                yield category, packages

    @property
    def total(self) -> int:
        """全バケットのパッケージ総数。"""
        return sum(len(packages) for packages in self._buckets.values())

    def __len__(self) -> int:
        return self.total

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{category.value}={len(packages)}" for category, packages in self.items()
        )
        return f"CategoryBuckets({counts})"
