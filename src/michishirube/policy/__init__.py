"""コマンド公開ポリシー。

公開 API:
    - グループ: DEFAULT_COMMAND_GROUPS, DEFAULT_INCLUDE_EXPRESSION, GroupTable,
      merge_command_groups, normalize_pattern, resolve_command_patterns
    - ワイルドカード: wildcard_to_regex
    - フィルタ: CommandMatcher, create_command_matcher, filter_leaf_commands
"""

from michishirube.policy._filter import (
    CommandMatcher,
    create_command_matcher,
    filter_leaf_commands,
)
from michishirube.policy._groups import (
    DEFAULT_COMMAND_GROUPS,
    DEFAULT_INCLUDE_EXPRESSION,
    DEFAULT_INCLUDE_GROUP,
    GROUP_REFERENCE_PREFIX,
    GroupTable,
    merge_command_groups,
    normalize_pattern,
    resolve_command_patterns,
    tokenize_expression,
)
from michishirube.policy._wildcard import wildcard_to_regex

__all__ = [
    "CommandMatcher",
    "DEFAULT_COMMAND_GROUPS",
    "DEFAULT_INCLUDE_EXPRESSION",
    "DEFAULT_INCLUDE_GROUP",
    "GROUP_REFERENCE_PREFIX",
    "GroupTable",
    "create_command_matcher",
    "filter_leaf_commands",
    "merge_command_groups",
    "normalize_pattern",
    "resolve_command_patterns",
    "tokenize_expression",
    "wildcard_to_regex",
]
