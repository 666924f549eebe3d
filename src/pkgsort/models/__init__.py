"""pkgsort ドメインモデルパッケージ。"""

from pkgsort.models._base import PkgsortBaseModel
from pkgsort.models.buckets import CategoryBuckets
from pkgsort.models.category import Category, category_labels
from pkgsort.models.config import PkgsortConfig
from pkgsort.models.exit_code import ExitCode

__all__ = [
    "Category",
    "CategoryBuckets",
    "ExitCode",
    "PkgsortBaseModel",
    "PkgsortConfig",
    "category_labels",
]
