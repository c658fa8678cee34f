"""TOML 設定ファイルローダー。

パースのみを担当し、バリデーションは _resolver.py が担当する。
アクセスエラーは例外として送出する。

ポリシー式（include / exclude）は TOML 配列でも記述できる。
配列は空白区切りの単一の式に連結してから返す。
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Final

_TOOL_SECTION_KEY: Final[str] = "tool"
_MICHISHIRUBE_SECTION_KEY: Final[str] = "michishirube"
_POLICY_KEYS: Final[tuple[str, ...]] = ("include", "exclude")
_POLICY_TOKEN_SEPARATOR: Final[str] = " "


def _join_policy_expressions(data: dict[str, object]) -> dict[str, object]:
    """include / exclude が文字列配列の場合、空白区切りの式に連結する。

    文字列以外の要素を含む配列はそのまま残し、後続のバリデーションに委ねる。
    """
    joined = dict(data)
    for key in _POLICY_KEYS:
        value = joined.get(key)
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            joined[key] = _POLICY_TOKEN_SEPARATOR.join(value)
    return joined


def load_toml_config(path: Path) -> dict[str, object]:
    """TOML 設定ファイルを読み込み辞書として返す。

    Raises:
        tomllib.TOMLDecodeError: TOML 構文エラーの場合。
        PermissionError: 読み取り権限がない場合。
        FileNotFoundError: ファイルが存在しない場合。
    """
    with path.open("rb") as f:
        return _join_policy_expressions(tomllib.load(f))


def load_pyproject_config(path: Path) -> dict[str, object] | None:
    """pyproject.toml から [tool.michishirube] セクションを読み込む。

    Args:
        path: pyproject.toml のパス。

    Returns:
        [tool.michishirube] セクションの辞書。セクションが存在しなければ None。

    Raises:
        tomllib.TOMLDecodeError: TOML 構文エラーの場合。
        FileNotFoundError: ファイルが存在しない場合。
        PermissionError: 読み取り権限がない場合。
    """
    with path.open("rb") as f:
        data = tomllib.load(f)
    tool = data.get(_TOOL_SECTION_KEY)
    if not isinstance(tool, dict):
        return None
    section = tool.get(_MICHISHIRUBE_SECTION_KEY)
    if not isinstance(section, dict):
        return None
    return _join_policy_expressions(section)
