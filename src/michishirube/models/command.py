"""コマンドツリーモデル。

CommandNode（コマンドツリーの最小ケイパビリティ）、CommandSpec（定義ファイルから
構築されるツリーノード）、LeafEntry（葉コマンドの平坦化エントリ）を定義する。
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final, Protocol, runtime_checkable

from pydantic import Field

from michishirube.models._base import MichishirubeBaseModel

COMMAND_PATH_SEPARATOR: Final[str] = ":"
"""コマンドパスの階層区切り文字。"""

TOOL_NAME_SEPARATOR: Final[str] = "_"
"""外部ツール名のセグメント区切り文字。"""

_TOOL_NAME_INVALID_CHARS: Final[re.Pattern[str]] = re.compile(r"[^a-zA-Z0-9_]")


# =============================================================================
# CommandNode（ツリーのケイパビリティ）
# =============================================================================


@runtime_checkable
class CommandNode(Protocol):
    """解決エンジンが参照するコマンドツリーノードの最小インターフェース。

    共通の基底クラスは要求しない。CommandSpec のような静的定義と、
    click / typer のライブコマンドツリーのアダプターの両方がこれを満たす。
    解決エンジンはノードを読み取るだけで変更しない。
    """

    @property
    def name(self) -> str: ...

    @property
    def aliases(self) -> Sequence[str]: ...

    @property
    def children(self) -> Sequence[CommandNode]: ...


# =============================================================================
# CommandSpec（定義ファイル由来のノード）
# =============================================================================


class CommandSpec(MichishirubeBaseModel):
    """TOML / JSON 定義ファイルから構築されるコマンドツリーノード。

    兄弟間の name の一意性は要求しない（解決エンジンは重複を許容する）。

    Attributes:
        name: コマンド名（正規名）。
        aliases: 別名のタプル。
        description: コマンドの説明。解決には使用せず、葉コマンドの公開情報に使用する。
        children: 子コマンド。定義順を保持する。
    """

    name: str = Field(min_length=1)
    aliases: tuple[str, ...] = ()
    description: str = ""
    children: tuple[CommandSpec, ...] = ()


# =============================================================================
# LeafEntry（葉コマンド）
# =============================================================================


def to_command_path(segments: Sequence[str]) -> str:
    """セグメント列を小文字のコロン区切りコマンドパスに変換する。"""
    return COMMAND_PATH_SEPARATOR.join(segments).lower()


def to_tool_name(segments: Sequence[str]) -> str:
    """セグメント列を外部ツール名に変換する。

    アンダースコアで連結し、英数字とアンダースコア以外は全てアンダースコアに置換する。
    例: ("po-cart", "list") → "po_cart_list"
    """
    return _TOOL_NAME_INVALID_CHARS.sub(
        TOOL_NAME_SEPARATOR, TOOL_NAME_SEPARATOR.join(segments)
    )


class LeafEntry(MichishirubeBaseModel):
    """子を持たないコマンドの平坦化エントリ。

    Attributes:
        segments: ルート（合成ラッパーを除く）から葉までの正規名の列。
        command_path: segments をコロンで連結し小文字化したパス。
        tool_name: 外部ツール呼び出し用の名前。
        description: 外部ツールとして公開する際の説明文。
    """

    segments: tuple[str, ...] = Field(min_length=1)
    command_path: str = Field(min_length=1)
    tool_name: str = Field(min_length=1)
    description: str = ""

    @classmethod
    def from_segments(
        cls, segments: Sequence[str], description: str = ""
    ) -> LeafEntry:
        """セグメント列から command_path と tool_name を導出して構築する。"""
        return cls(
            segments=tuple(segments),
            command_path=to_command_path(segments),
            tool_name=to_tool_name(segments),
            description=description,
        )
