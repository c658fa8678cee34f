"""click / typer のコマンドツリーアダプター。

登録済みのライブコマンドを CommandNode として参照できるようにする。
"""

from __future__ import annotations

from dataclasses import dataclass

import click
import typer

_DESCRIPTION_LIMIT = 120


@dataclass(frozen=True)
class ClickCommandNode:
    """click.Command を CommandNode として公開するアダプター。

    click にはエイリアスの概念がないため aliases は常に空。
    description は short_help、なければ help の先頭文から取る。
    子コマンドは Group への登録順で、隠しコマンドも含む。

    Attributes:
        command: ラップ対象の click コマンド。
        registered_name: 親 Group に登録された名前。None の場合は command.name を使用する。
    """

    command: click.Command
    registered_name: str | None = None

    @property
    def name(self) -> str:
        return self.registered_name or self.command.name or ""

    @property
    def aliases(self) -> tuple[str, ...]:
        return ()

    @property
    def description(self) -> str:
        return self.command.get_short_help_str(limit=_DESCRIPTION_LIMIT)

    @property
    def children(self) -> tuple[ClickCommandNode, ...]:
        if not isinstance(self.command, click.Group):
            return ()
        return tuple(
            ClickCommandNode(command=sub, registered_name=sub_name)
            for sub_name, sub in self.command.commands.items()
        )


def from_typer(app: typer.Typer, name: str) -> ClickCommandNode:
    """Typer アプリケーションのコマンドツリーをルートノードとして返す。

    Args:
        app: 対象の Typer アプリケーション。
        name: ルートノードの名前（通常はプログラム名）。
    """
    return ClickCommandNode(command=typer.main.get_command(app), registered_name=name)
