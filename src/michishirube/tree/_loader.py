"""コマンドツリー定義ファイルローダー。

TOML または JSON 形式のツリー定義を読み込み、CommandSpec として構築する。
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from michishirube.models.command import CommandSpec

_TOML_SUFFIX: Final[str] = ".toml"
_JSON_SUFFIX: Final[str] = ".json"


class CommandTreeLoadError(Exception):
    """コマンドツリー定義の読み込み失敗。

    ファイル不存在、アクセス権限エラー、構文エラー、スキーマ不一致など
    定義ファイルの読み込みに関するあらゆる失敗を表す。
    """


def _read_tree_data(path: Path) -> object:
    """拡張子に応じて定義ファイルをパースする。

    Raises:
        CommandTreeLoadError: 未対応の拡張子、または読み込み・パースに失敗した場合。
    """
    suffix = path.suffix.lower()
    if suffix not in (_TOML_SUFFIX, _JSON_SUFFIX):
        raise CommandTreeLoadError(
            f"Unsupported command tree format '{path.suffix}': {path}. "
            f"Use a {_TOML_SUFFIX} or {_JSON_SUFFIX} file."
        )
    try:
        if suffix == _TOML_SUFFIX:
            with path.open("rb") as f:
                return tomllib.load(f)
        return json.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CommandTreeLoadError(
            f"Cannot parse command tree '{path}': {exc}"
        ) from exc
    except OSError as exc:
        raise CommandTreeLoadError(f"Cannot read command tree '{path}': {exc}") from exc


def load_command_tree(path: Path) -> CommandSpec:
    """定義ファイルからコマンドツリーを読み込む。

    ファイルのトップレベルがルートノードになる。子は children 配列で入れ子にする。

    TOML の例::

        name = "shop"

        [[children]]
        name = "order"
        aliases = ["ord"]

        [[children.children]]
        name = "list"

    Args:
        path: .toml または .json の定義ファイルパス。

    Returns:
        ルートの CommandSpec。

    Raises:
        CommandTreeLoadError: 読み込み・パース・バリデーションに失敗した場合。
    """
    data = _read_tree_data(path)
    try:
        return CommandSpec.model_validate(data)
    except ValidationError as exc:
        raise CommandTreeLoadError(f"Invalid command tree '{path}': {exc}") from exc
