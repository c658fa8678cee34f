"""michishirube ドメインモデルパッケージ。"""

from michishirube.models._base import MichishirubeBaseModel
from michishirube.models.command import (
    COMMAND_PATH_SEPARATOR,
    CommandNode,
    CommandSpec,
    LeafEntry,
    to_command_path,
    to_tool_name,
)
from michishirube.models.config import (
    DEFAULT_PROGRAM_NAME,
    MichishirubeConfig,
    OutputFormat,
)
from michishirube.models.errors import (
    AmbiguousCommandError,
    CircularGroupReferenceError,
    CommandResolutionError,
    ResolutionErrorKind,
    UnknownGroupError,
)
from michishirube.models.exit_code import ExitCode

__all__ = [
    "AmbiguousCommandError",
    "COMMAND_PATH_SEPARATOR",
    "CircularGroupReferenceError",
    "CommandResolutionError",
    "CommandNode",
    "CommandSpec",
    "DEFAULT_PROGRAM_NAME",
    "ExitCode",
    "LeafEntry",
    "MichishirubeBaseModel",
    "MichishirubeConfig",
    "OutputFormat",
    "ResolutionErrorKind",
    "UnknownGroupError",
    "to_command_path",
    "to_tool_name",
]
