"""CliApp — Typer アプリケーション定義。

サブコマンド:
    expand: 省略形・エイリアス・コロン連結のコマンドパスを正規名に展開する。
    tools: ポリシーで公開が許可された葉コマンドを一覧表示する。
    groups: グループテーブルの一覧、または単一グループの展開結果を表示する。

stdout には結果のみを出力し、エラー・警告は stderr に出力する。
"""

from __future__ import annotations

import importlib.metadata
import sys
import tomllib
from pathlib import Path
from typing import Annotated, assert_never

import typer
from pydantic import ValidationError

from michishirube.cli._formatter import (
    ToolListing,
    build_tool_entries,
    format_groups_text,
    format_tools_text,
)
from michishirube.config import locate_project, resolve_config, resolve_group_table
from michishirube.models.command import CommandNode
from michishirube.models.config import MichishirubeConfig, OutputFormat
from michishirube.models.errors import CommandResolutionError
from michishirube.models.exit_code import ExitCode
from michishirube.policy import (
    DEFAULT_COMMAND_GROUPS,
    GROUP_REFERENCE_PREFIX,
    create_command_matcher,
    resolve_command_patterns,
)
from michishirube.resolution import collect_leaf_commands, expand_command_abbreviations
from michishirube.tree import CommandTreeLoadError, from_typer, load_command_tree

app = typer.Typer(
    name="michishirube",
    help=(
        "Resolve abbreviated command paths against a command tree and decide "
        "which leaf commands a policy exposes."
    ),
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """--version 指定時にバージョン番号を出力して終了する。"""
    if value:
        print(importlib.metadata.version("michishirube"))
        raise typer.Exit()


def main() -> None:
    """CLI エントリポイント。pyproject.toml の [project.scripts] から呼び出される。

    michishirube と michi の両方で同一の関数が呼ばれる。
    """
    app()


@app.callback()
def _root_callback(
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
    """Resolve and filter command paths."""


# --- 共通ヘルパー ---


def _load_config(cli_overrides: dict[str, object]) -> MichishirubeConfig:
    """設定を解決する。失敗時はメッセージを stderr に出力し INPUT_ERROR で終了する。"""
    try:
        return resolve_config(cli_overrides=cli_overrides)
    except (ValidationError, tomllib.TOMLDecodeError, TypeError) as e:
        print(
            f"Error: Invalid configuration: {e}\n"
            "Check .michishirube/config.toml for syntax errors or invalid values.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None
    except PermissionError as e:
        print(
            f"Error: Cannot read configuration file: {e}\n"
            "Check file permissions for .michishirube/config.toml.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None


def _resolve_tree_path(option: Path | None, config: MichishirubeConfig) -> Path | None:
    """コマンドツリー定義ファイルのパスを決定する。

    --tree はそのまま使用する。設定ファイル由来の相対パスは
    プロジェクトルート（.michishirube/ を含むディレクトリ）基準で解決する。
    """
    if option is not None:
        return option
    if config.command_tree is None:
        return None
    return locate_project(Path.cwd()).resolve_tree_path(config.command_tree)


def _load_tree(option: Path | None, config: MichishirubeConfig) -> CommandNode:
    """コマンドツリーを読み込む。

    定義ファイルが指定されていない場合は、この CLI 自身のコマンドツリーを使用する。
    """
    tree_path = _resolve_tree_path(option, config)
    if tree_path is None:
        return from_typer(app, config.program_name)
    try:
        return load_command_tree(tree_path)
    except CommandTreeLoadError as e:
        print(
            f"Error: {e}\n"
            "Pass a valid .toml or .json file with --tree, "
            "or set 'command_tree' in .michishirube/config.toml.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None


def _fail_resolution(error: CommandResolutionError) -> typer.Exit:
    """解決エラーを stderr に出力し、送出すべき typer.Exit を返す。"""
    print(f"Error: {error}", file=sys.stderr)
    return typer.Exit(code=ExitCode.RESOLUTION_ERROR)


_TREE_OPTION_HELP = (
    "Command tree definition (.toml or .json). "
    "Defaults to this program's own commands."
)


# --- サブコマンド ---


@app.command(context_settings={"ignore_unknown_options": True})
def expand(
    tokens: Annotated[
        list[str] | None,
        typer.Argument(help="Command tokens, e.g. 'ord:li' or 'c gc --flag'."),
    ] = None,
    tree: Annotated[
        Path | None, typer.Option("--tree", help=_TREE_OPTION_HELP)
    ] = None,
) -> None:
    """Expand abbreviated, aliased or colon-joined command paths."""
    config = _load_config({})
    root = _load_tree(tree, config)
    try:
        expanded = expand_command_abbreviations(
            root, tokens or [], program_name=config.program_name
        )
    except CommandResolutionError as e:
        raise _fail_resolution(e) from None
    print(" ".join(expanded))


@app.command()
def tools(
    tree: Annotated[
        Path | None, typer.Option("--tree", help=_TREE_OPTION_HELP)
    ] = None,
    include: Annotated[
        str | None,
        typer.Option(
            help="Include expression, e.g. '@safe order:*'. Defaults to @safe."
        ),
    ] = None,
    exclude: Annotated[
        str | None, typer.Option(help="Exclude expression. Wins over --include.")
    ] = None,
    show_all: Annotated[
        bool,
        typer.Option("--all", help="List every leaf command with an ALLOWED column."),
    ] = False,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", help="Output format: text or json."),
    ] = None,
) -> None:
    """List leaf commands exposed by the include/exclude policy."""
    config = _load_config(
        {"include": include, "exclude": exclude, "output_format": output_format}
    )
    root = _load_tree(tree, config)
    group_table = resolve_group_table(config, DEFAULT_COMMAND_GROUPS)
    try:
        matcher = create_command_matcher(
            group_table, include=config.include, exclude=config.exclude
        )
    except CommandResolutionError as e:
        raise _fail_resolution(e) from None

    leaves = collect_leaf_commands(root)
    all_entries = build_tool_entries(leaves, matcher)
    allowed_count = sum(1 for e in all_entries if e.allowed)
    entries = all_entries if show_all else tuple(e for e in all_entries if e.allowed)

    if config.output_format == OutputFormat.JSON:
        listing = ToolListing(
            tools=entries,
            include_patterns=matcher.include_patterns,
            exclude_patterns=matcher.exclude_patterns,
        )
        print(listing.model_dump_json(indent=2))
    elif config.output_format == OutputFormat.TEXT:
        print(format_tools_text(entries, show_allowed=show_all))
        print(
            f"\n{allowed_count} of {len(all_entries)} leaf commands allowed.",
            file=sys.stderr,
        )
    else:
        assert_never(config.output_format)


@app.command()
def groups(
    name: Annotated[
        str | None, typer.Argument(help="Group name to expand into patterns.")
    ] = None,
) -> None:
    """List command groups or expand one group into its patterns."""
    config = _load_config({})
    table = resolve_group_table(config, DEFAULT_COMMAND_GROUPS)

    if name is None:
        print(format_groups_text(table))
        return

    reference = name
    if not reference.startswith(GROUP_REFERENCE_PREFIX):
        reference = f"{GROUP_REFERENCE_PREFIX}{name}"
    try:
        patterns = resolve_command_patterns(reference, table)
    except CommandResolutionError as e:
        raise _fail_resolution(e) from None
    for pattern in patterns:
        print(pattern)
