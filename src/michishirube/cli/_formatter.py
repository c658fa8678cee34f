"""葉コマンド一覧・グループ一覧の整形。"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence

from pydantic import Field

from michishirube.models._base import MichishirubeBaseModel
from michishirube.models.command import LeafEntry

_PATH_WIDTH_MIN = 16
_TOOL_WIDTH_MIN = 16
_DESCRIPTION_WIDTH_MIN = 16
_GROUP_WIDTH_MIN = 12
_COLUMN_GAP = 2


class ToolEntry(MichishirubeBaseModel):
    """一覧表示用の葉コマンド情報。"""

    command_path: str = Field(min_length=1)
    tool_name: str = Field(min_length=1)
    description: str
    segments: tuple[str, ...]
    allowed: bool


class ToolListing(MichishirubeBaseModel):
    """葉コマンド一覧。JSON 出力のトップレベル。"""

    tools: tuple[ToolEntry, ...]
    include_patterns: tuple[str, ...]
    exclude_patterns: tuple[str, ...]


def build_tool_entries(
    leaves: Sequence[LeafEntry], is_allowed: Callable[[str], bool]
) -> tuple[ToolEntry, ...]:
    """LeafEntry 列を is_allowed で判定した公開可否付きの ToolEntry 列に変換する。"""
    return tuple(
        ToolEntry(
            command_path=leaf.command_path,
            tool_name=leaf.tool_name,
            description=leaf.description,
            segments=leaf.segments,
            allowed=is_allowed(leaf.command_path),
        )
        for leaf in leaves
    )


def _column_width(minimum: int, values: Sequence[str]) -> int:
    return max([minimum, *(len(v) for v in values)]) + _COLUMN_GAP


def format_tools_text(entries: Sequence[ToolEntry], *, show_allowed: bool) -> str:
    """葉コマンド一覧を固定幅テーブルの文字列に整形する。

    列は COMMAND, TOOL, DESCRIPTION の順。show_allowed が True の場合のみ
    末尾に ALLOWED 列を出力する。エントリが空の場合はヘッダーのみを返す。
    """
    path_width = _column_width(_PATH_WIDTH_MIN, [e.command_path for e in entries])
    tool_width = _column_width(_TOOL_WIDTH_MIN, [e.tool_name for e in entries])
    description_width = _column_width(
        _DESCRIPTION_WIDTH_MIN, [e.description for e in entries]
    )

    header = f"{'COMMAND':<{path_width}}{'TOOL':<{tool_width}}"
    if show_allowed:
        header += f"{'DESCRIPTION':<{description_width}}ALLOWED"
    else:
        header += "DESCRIPTION"
    lines = [header, "-" * len(header)]
    for entry in entries:
        line = f"{entry.command_path:<{path_width}}{entry.tool_name:<{tool_width}}"
        if show_allowed:
            line += f"{entry.description:<{description_width}}"
            line += "yes" if entry.allowed else "no"
        else:
            line += entry.description
        lines.append(line.rstrip())
    return "\n".join(lines)


def format_groups_text(groups: Mapping[str, Sequence[str]]) -> str:
    """グループテーブルを名前順の固定幅テーブルに整形する。"""
    name_width = _column_width(_GROUP_WIDTH_MIN, list(groups))
    header = f"{'GROUP':<{name_width}}ENTRIES"
    lines = [header, "-" * len(header)]
    for name in sorted(groups):
        lines.append(f"{name:<{name_width}}{' '.join(groups[name])}")
    return "\n".join(lines)
