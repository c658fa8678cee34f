"""ClickCommandNode / from_typer のテスト。"""

from __future__ import annotations

import click
import typer

from michishirube.models.command import CommandNode
from michishirube.resolution import collect_leaf_commands, expand_command_abbreviations
from michishirube.tree import ClickCommandNode, from_typer


def _shop_app() -> typer.Typer:
    app = typer.Typer()
    order = typer.Typer()

    @app.callback()
    def root() -> None:
        """Shop."""

    @app.command()
    def status() -> None:
        """Show status."""

    @app.command(hidden=True)
    def debug() -> None:
        """Hidden."""

    @order.command("list")
    def list_orders() -> None:
        """List orders."""

    @order.command()
    def show() -> None:
        """Show one order."""

    app.add_typer(order, name="order")
    return app


class TestFromTyper:
    """Typer アプリケーションのツリー化。"""

    def test_root_name(self) -> None:
        assert from_typer(_shop_app(), "shop").name == "shop"

    def test_children_in_registration_order(self) -> None:
        root = from_typer(_shop_app(), "shop")
        assert [c.name for c in root.children] == ["status", "debug", "order"]

    def test_satisfies_protocol(self) -> None:
        assert isinstance(from_typer(_shop_app(), "shop"), CommandNode)

    def test_leaves(self) -> None:
        paths = [leaf.command_path for leaf in collect_leaf_commands(from_typer(_shop_app(), "shop"))]
        assert paths == ["status", "debug", "order:list", "order:show"]

    def test_expand_against_live_tree(self) -> None:
        root = from_typer(_shop_app(), "shop")
        assert expand_command_abbreviations(root, ["or:li", "--all"]) == [
            "order",
            "list",
            "--all",
        ]


class TestClickCommandNode:
    """click コマンドの直接ラップ。"""

    def test_plain_command_has_no_children(self) -> None:
        node = ClickCommandNode(command=click.Command("ping"))
        assert node.name == "ping"
        assert node.aliases == ()
        assert node.children == ()

    def test_registered_name_wins(self) -> None:
        group = click.Group("root")
        group.add_command(click.Command("ping"), name="pong")
        [child] = ClickCommandNode(command=group).children
        assert child.name == "pong"

    def test_description_from_help(self) -> None:
        node = ClickCommandNode(command=click.Command("ping", help="Ping the server."))
        assert "Ping the server" in node.description

    def test_description_empty_without_help(self) -> None:
        assert ClickCommandNode(command=click.Command("ping")).description == ""

    def test_typer_docstring_becomes_leaf_description(self) -> None:
        leaves = collect_leaf_commands(from_typer(_shop_app(), "shop"))
        assert "List orders" in leaves[2].description
