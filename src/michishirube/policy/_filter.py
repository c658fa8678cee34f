"""include / exclude ポリシーによるコマンドフィルタ。

外部のツール呼び出しトランスポートに公開する葉コマンドを、
include 式と exclude 式から構築した述語で選別する。
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from michishirube.models.command import CommandNode, LeafEntry
from michishirube.policy._groups import (
    DEFAULT_INCLUDE_EXPRESSION,
    GroupTable,
    resolve_command_patterns,
)
from michishirube.policy._wildcard import wildcard_to_regex
from michishirube.resolution._leaves import collect_leaf_commands

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandMatcher:
    """コマンドパスに対する公開可否の述語。

    構築後は不変で、任意の数のパス判定に再利用できる。

    Attributes:
        include_patterns: include 式の展開結果。
        exclude_patterns: exclude 式の展開結果。
        include_regexes: include パターンのコンパイル結果。
        exclude_regexes: exclude パターンのコンパイル結果。
    """

    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]
    include_regexes: tuple[re.Pattern[str], ...]
    exclude_regexes: tuple[re.Pattern[str], ...]

    def __call__(self, command_path: str) -> bool:
        """command_path が公開対象なら True を返す。

        パスは小文字化してから判定する。include パターンが空の場合は全てに一致し、
        exclude に一致したパスは include の結果にかかわらず除外される。
        """
        path = command_path.lower()
        included = not self.include_regexes or any(
            regex.match(path) for regex in self.include_regexes
        )
        if not included:
            return False
        return not any(regex.match(path) for regex in self.exclude_regexes)


def create_command_matcher(
    groups: GroupTable,
    *,
    include: str | None = None,
    exclude: str | None = None,
) -> CommandMatcher:
    """include / exclude 式からコマンドパスの述語を構築する。

    include が未指定・空白のみの場合はデフォルトの safe グループを使用する。
    "," のように区切り文字のみの場合はパターン0件となり、全てのパスに一致する。
    exclude が未指定の場合は何も除外しない。

    Args:
        groups: グループテーブル。
        include: 公開するコマンドのポリシー式。
        exclude: 除外するコマンドのポリシー式。include より優先される。

    Returns:
        CommandMatcher: 小文字コロン区切りのコマンドパスに対する述語。

    Raises:
        UnknownGroupError: 存在しないグループを参照した場合。
        CircularGroupReferenceError: グループ参照が循環している場合。
    """
    if include is None or not include.strip():
        include = DEFAULT_INCLUDE_EXPRESSION
    include_patterns = tuple(resolve_command_patterns(include, groups))
    exclude_patterns = tuple(resolve_command_patterns(exclude, groups))
    logger.debug(
        "Built command matcher: %d include pattern(s), %d exclude pattern(s)",
        len(include_patterns),
        len(exclude_patterns),
    )
    return CommandMatcher(
        include_patterns=include_patterns,
        exclude_patterns=exclude_patterns,
        include_regexes=tuple(wildcard_to_regex(p) for p in include_patterns),
        exclude_regexes=tuple(wildcard_to_regex(p) for p in exclude_patterns),
    )


def filter_leaf_commands(
    root: CommandNode,
    matcher: CommandMatcher,
) -> list[LeafEntry]:
    """コマンドツリーの葉コマンドのうち matcher が許可するものを行きがけ順で返す。"""
    return [
        leaf for leaf in collect_leaf_commands(root) if matcher(leaf.command_path)
    ]
