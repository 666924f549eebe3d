"""CliApp — Typer アプリケーション定義。

入力ファイルを開き、出力ディレクトリを作成してから対話分類を行い、
カテゴリ別ファイルを書き出す。エラーは stderr に1行で報告し、
エラー分類に応じた終了コードで終了する。
"""

from __future__ import annotations

import importlib.metadata
import sys
import tomllib
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from pkgsort.cli._terminal_prompt import TerminalCategoryPrompter
from pkgsort.config import resolve_config
from pkgsort.engine import (
    InputOpenError,
    LineDecodeError,
    OutputDirError,
    OutputWriteError,
    PromptError,
    WrittenFile,
    classify_packages,
    ensure_output_dir,
    format_written,
    open_input,
    write_buckets,
)
from pkgsort.models.exit_code import ExitCode

app = typer.Typer(
    name="pkgsort",
    help=(
        "Interactively sort a list of package names into category files.\n\n"
        "Each non-blank line of INPUT_FILE is shown and assigned to one of: "
        "dev, desktop, entertainment, core, misc. "
        "Non-empty categories are written to <category>.txt in the output directory."
    ),
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    """--version 指定時にバージョン番号を出力して終了する。"""
    if value:
        print(importlib.metadata.version("pkgsort"))
        raise typer.Exit()


def _fail(message: str, code: ExitCode, hint: str | None = None) -> typer.Exit:
    """エラーメッセージを stderr に1行で出力し、送出用の typer.Exit を返す。

    hint は解決方法の案内としてメッセージの後ろに続ける。
    """
    line = f"Error: {message}" if hint is None else f"Error: {message}. {hint}"
    print(line, file=sys.stderr)
    return typer.Exit(code=code)


def _report_written(record: WrittenFile) -> None:
    print(format_written(record))


def main() -> None:
    """CLI エントリポイント。pyproject.toml の [project.scripts] から呼び出される。"""
    app()


@app.command()
def sort(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Text file with one package name per line.",
            metavar="INPUT_FILE",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Directory for the category files.",
            show_default=".",
        ),
    ] = None,
    encoding: Annotated[
        str | None,
        typer.Option(
            "--encoding",
            help="Text encoding of the input and output files.",
            show_default="utf-8",
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Classify each package in INPUT_FILE and write one file per category."""
    # 1. config 解決
    config_overrides: dict[str, object] = {
        "output_dir": str(output_dir) if output_dir is not None else None,
        "encoding": encoding,
    }
    try:
        config = resolve_config(cli_overrides=config_overrides)
    except (ValidationError, tomllib.TOMLDecodeError) as e:
        raise _fail(
            f"Invalid configuration: {e}",
            ExitCode.SETUP_ERROR,
            "Check [tool.pkgsort] in pyproject.toml and "
            "~/.config/pkgsort/config.toml.",
        ) from None
    except OSError as e:
        raise _fail(
            f"Cannot read configuration file: {e}",
            ExitCode.SETUP_ERROR,
            "Check that the configuration file is a readable regular file.",
        ) from None

    # 2. 入力ファイルを開く（出力ディレクトリ作成より先に検証する）
    try:
        source = open_input(input_file)
    except InputOpenError as e:
        raise _fail(
            str(e), ExitCode.INPUT_ERROR, "Check the path and file permissions."
        ) from None

    with source:
        # 3. 出力ディレクトリ作成
        try:
            resolved_output_dir = ensure_output_dir(Path(config.output_dir))
        except OutputDirError as e:
            raise _fail(str(e), ExitCode.SETUP_ERROR) from None

        # 4. 対話分類
        try:
            buckets = classify_packages(
                source,
                TerminalCategoryPrompter(),
                encoding=config.encoding,
            )
        except LineDecodeError as e:
            raise _fail(
                f"{e} (input file: {input_file})",
                ExitCode.INPUT_ERROR,
                "Use --encoding to specify the input file encoding.",
            ) from None
        except PromptError as e:
            raise _fail(str(e), ExitCode.INTERACTION_ERROR) from None

    # 5. カテゴリ別ファイル書き出し
    try:
        write_buckets(
            buckets,
            resolved_output_dir,
            encoding=config.encoding,
            on_written=_report_written,
        )
    except OutputWriteError as e:
        raise _fail(str(e), ExitCode.OUTPUT_ERROR) from None
