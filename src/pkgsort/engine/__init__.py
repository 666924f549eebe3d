"""パッケージ分類エンジン。

以下のパイプラインで分類を実行する:

1. 入力ファイルを開く（open_input）
2. 出力ディレクトリ作成（ensure_output_dir）
3. 対話分類ループ（classify_packages + CategoryPrompter）
4. カテゴリ別ファイル書き出し（write_buckets）
"""

from pkgsort.engine._classifier import (
    InputOpenError,
    LineDecodeError,
    classify_packages,
    open_input,
)
from pkgsort.engine._prompt import CategoryPrompter, PromptError, ScriptedPrompter
from pkgsort.engine._writer import (
    OutputDirError,
    OutputWriteError,
    WrittenFile,
    ensure_output_dir,
    format_written,
    write_buckets,
)

__all__ = [
    "CategoryPrompter",
    "InputOpenError",
    "LineDecodeError",
    "OutputDirError",
    "OutputWriteError",
    "PromptError",
    "ScriptedPrompter",
    "WrittenFile",
    "classify_packages",
    "ensure_output_dir",
    "format_written",
    "open_input",
    "write_buckets",
]
