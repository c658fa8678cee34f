"""コマンドグループの定義と展開。

ポリシー式（空白・カンマ区切りのトークン列）を、グループテーブルに従って
正規化済みワイルドカードパターンの平坦なリストに再帰展開する。
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Final

from michishirube.models.command import COMMAND_PATH_SEPARATOR
from michishirube.models.errors import (
    CircularGroupReferenceError,
    UnknownGroupError,
)

logger = logging.getLogger(__name__)

GROUP_REFERENCE_PREFIX: Final[str] = "@"

DEFAULT_INCLUDE_GROUP: Final[str] = "safe"
DEFAULT_INCLUDE_EXPRESSION: Final[str] = (
    f"{GROUP_REFERENCE_PREFIX}{DEFAULT_INCLUDE_GROUP}"
)
"""include 式が未指定・空の場合に使用する式。"""

_EXPRESSION_SEPARATOR_RE: Final[re.Pattern[str]] = re.compile(r"[\s,]+")
_PATTERN_SEPARATOR_RE: Final[re.Pattern[str]] = re.compile(r"[\s_]+")

GroupTable = Mapping[str, Sequence[str]]
"""グループ名からエントリ列へのマッピング。エントリはパターンまたは @name 参照。"""


# ---------------------------------------------------------------------------
# デフォルトグループテーブル
# ---------------------------------------------------------------------------

_COMMAND_FAMILIES: Final[tuple[str, ...]] = (
    "website",
    "store",
    "customer",
    "order",
    "eav",
    "product",
    "company",
    "cart",
    "tax",
    "inventory",
    "event",
    "webhook",
    "po-cart",
    "import",
    "module",
    "connection",
    "shipment",
    "adobe-io-event",
    "rest",
    "plugin",
    "console",
)

_READ_VERBS: Final[tuple[str, ...]] = (
    "list",
    "show",
    "search",
    "view",
    "status",
    "latest",
    "history",
    "structure",
    "totals",
    "comments",
    "supported-list",
    "shipping-methods",
    "payment-info",
    "check-configuration",
)

_WRITE_VERBS: Final[tuple[str, ...]] = (
    "add",
    "create",
    "edit",
    "update",
    "delete",
    "cancel",
    "hold",
    "unhold",
    "email",
    "confirm",
    "select",
    "label",
    "track",
    "register",
    "unregister",
    "increase",
    "decrease",
    "clear-token-cache",
    "json",
    "csv",
)


def _verb_patterns(verbs: Sequence[str]) -> tuple[str, ...]:
    return tuple(f"*{COMMAND_PATH_SEPARATOR}{verb}" for verb in verbs)


DEFAULT_COMMAND_GROUPS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        **{
            family: (f"{family}{COMMAND_PATH_SEPARATOR}*",)
            for family in _COMMAND_FAMILIES
        },
        "catalog": ("@product", "@inventory", "@tax", "@eav"),
        "sales": ("@order", "@cart", "@customer", "@shipment"),
        "b2b": ("@company", "@po-cart"),
        "cloud": ("@event", "@webhook", "@adobe-io-event"),
        "read": _verb_patterns(_READ_VERBS),
        "write": _verb_patterns(_WRITE_VERBS),
        DEFAULT_INCLUDE_GROUP: ("@read",),
        "risky": ("*",),
    }
)
"""アプリケーション同梱のデフォルトグループテーブル。

safe は読み取り専用の操作のみを許可する保守的な許可リストで、
include 式が未指定の場合に暗黙的に参照される。risky は全コマンドに一致する。
"""


def merge_command_groups(
    base: GroupTable,
    overrides: GroupTable,
) -> Mapping[str, tuple[str, ...]]:
    """グループテーブルをグループ名単位でマージした読み取り専用テーブルを返す。

    グループ名は大文字小文字を区別せず、overrides のエントリが base を置き換える。

    Args:
        base: ベースとなるグループテーブル。
        overrides: 上書きするグループテーブル。

    Returns:
        マージ済みの読み取り専用グループテーブル（キーは小文字）。
    """
    merged: dict[str, tuple[str, ...]] = {
        name.lower(): tuple(entries) for name, entries in base.items()
    }
    for name, entries in overrides.items():
        key = name.lower()
        if key in merged:
            logger.warning("Command group '%s' overrides an existing group", key)
        merged[key] = tuple(entries)
    return MappingProxyType(merged)


# ---------------------------------------------------------------------------
# 展開
# ---------------------------------------------------------------------------


def tokenize_expression(expression: str | None) -> list[str]:
    """ポリシー式を空白・カンマの連続で分割し、空トークンを除いて返す。"""
    if not expression:
        return []
    return [
        token
        for token in (t.strip() for t in _EXPRESSION_SEPARATOR_RE.split(expression))
        if token
    ]


def normalize_pattern(token: str) -> str:
    """パターンを正規化する。

    小文字化し、空白またはアンダースコアの連続をコロンに置換する。
    例: "Order_List" → "order:list", "website list" → "website:list"
    """
    return _PATTERN_SEPARATOR_RE.sub(COMMAND_PATH_SEPARATOR, token.lower())


def _resolve_token(
    token: str,
    groups: Mapping[str, Sequence[str]],
    stack: tuple[str, ...],
) -> list[str]:
    """単一トークンを再帰的にパターン列へ展開する。

    Args:
        token: パターンまたは @name 参照。
        groups: キーを小文字化済みのグループテーブル。
        stack: 現在展開中のグループ名の列（循環検出用）。

    Raises:
        UnknownGroupError: 参照先グループが存在しない場合。
        CircularGroupReferenceError: 参照先グループが展開中の場合。
    """
    if not token.startswith(GROUP_REFERENCE_PREFIX):
        return [normalize_pattern(token)]

    name = token[len(GROUP_REFERENCE_PREFIX) :].lower()
    entries = groups.get(name)
    if entries is None:
        raise UnknownGroupError(token)
    if name in stack:
        raise CircularGroupReferenceError((*stack[stack.index(name) :], name))

    patterns: list[str] = []
    for entry in entries:
        stripped = entry.strip()
        if stripped:
            patterns.extend(_resolve_token(stripped, groups, (*stack, name)))
    logger.debug("Expanded group '%s' into %d pattern(s)", name, len(patterns))
    return patterns


def resolve_command_patterns(
    expression: str | None,
    groups: GroupTable,
) -> list[str]:
    """ポリシー式をグループテーブルに従って正規化済みパターンのリストに展開する。

    @name 参照は大文字小文字を区別せずに解決され、参照先のエントリが
    再帰的に展開される。それ以外のトークンは normalize_pattern で正規化される。
    重複は除去せず、展開順を保持する。

    Args:
        expression: ポリシー式（例: "@catalog order:*"）。空・None は空リストを返す。
        groups: グループテーブル。

    Returns:
        正規化済みワイルドカードパターンのリスト。

    Raises:
        UnknownGroupError: 存在しないグループを参照した場合。
        CircularGroupReferenceError: グループ参照が循環している場合。
    """
    lookup = {name.lower(): entries for name, entries in groups.items()}
    patterns: list[str] = []
    for token in tokenize_expression(expression):
        patterns.extend(_resolve_token(token, lookup, ()))
    return patterns
