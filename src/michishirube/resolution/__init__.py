"""コマンドツリー解決エンジン。

公開 API:
    - トークン解決: CommandMatch, resolve_command_match
    - 略記展開: expand_command_abbreviations
    - 葉コマンド収集: collect_leaf_commands
    - エラー: CommandResolutionError, ResolutionErrorKind, AmbiguousCommandError,
      UnknownGroupError, CircularGroupReferenceError
"""

from michishirube.models.errors import (
    AmbiguousCommandError,
    CircularGroupReferenceError,
    CommandResolutionError,
    ResolutionErrorKind,
    UnknownGroupError,
)
from michishirube.resolution._expander import expand_command_abbreviations
from michishirube.resolution._leaves import collect_leaf_commands
from michishirube.resolution._matcher import CommandMatch, resolve_command_match

__all__ = [
    "AmbiguousCommandError",
    "CircularGroupReferenceError",
    "CommandMatch",
    "CommandResolutionError",
    "ResolutionErrorKind",
    "UnknownGroupError",
    "collect_leaf_commands",
    "expand_command_abbreviations",
    "resolve_command_match",
]
