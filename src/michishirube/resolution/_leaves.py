"""葉コマンドの収集。"""

from __future__ import annotations

from typing import Final

from michishirube.models.command import CommandNode, LeafEntry

_DESCRIPTION_ATTR: Final[str] = "description"
_FALLBACK_DESCRIPTION_VERB: Final[str] = "Execute"


def _leaf_description(
    node: CommandNode, program_name: str, segments: tuple[str, ...]
) -> str:
    """葉コマンドの説明文を返す。

    CommandNode は description を要求しないため任意属性として読み取る。
    未定義・空の場合は "Execute <program_name> <segments を空白連結>" を返す。
    """
    description = getattr(node, _DESCRIPTION_ATTR, None)
    if isinstance(description, str) and description.strip():
        return description.strip()
    return " ".join((_FALLBACK_DESCRIPTION_VERB, program_name, *segments))


def collect_leaf_commands(
    root: CommandNode, *, program_name: str | None = None
) -> list[LeafEntry]:
    """コマンドツリーを深さ優先・行きがけ順に走査し葉コマンドを列挙する。

    root 自身はセグメントに含めない（プログラム本体などの合成ラッパーとして扱う）。
    子を持つノードは葉にならず、その子孫が代わりに走査される。

    Args:
        root: コマンドツリーのルート。
        program_name: 説明文のフォールバックに使用するプログラム名。
            None の場合は root の name を使用する。

    Returns:
        行きがけ順の LeafEntry リスト。root が子を持たなければ空リスト。
    """
    program = program_name if program_name is not None else root.name
    leaves: list[LeafEntry] = []

    def _walk(node: CommandNode, segments: tuple[str, ...]) -> None:
        for child in node.children:
            child_segments = (*segments, child.name)
            if child.children:
                _walk(child, child_segments)
            else:
                leaves.append(
                    LeafEntry.from_segments(
                        child_segments,
                        _leaf_description(child, program, child_segments),
                    )
                )

    _walk(root, ())
    return leaves
