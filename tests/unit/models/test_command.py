"""コマンドツリーモデルのテスト。"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from michishirube.models.command import (
    CommandNode,
    CommandSpec,
    LeafEntry,
    to_command_path,
    to_tool_name,
)


class TestCommandSpec:
    """CommandSpec のバリデーションと構造。"""

    def test_defaults(self) -> None:
        spec = CommandSpec(name="order")
        assert spec.aliases == ()
        assert spec.description == ""
        assert spec.children == ()

    def test_nested_from_dict(self) -> None:
        """入れ子の辞書から構築できる（リストはタプルに変換される）。"""
        spec = CommandSpec.model_validate(
            {
                "name": "root",
                "children": [
                    {"name": "order", "aliases": ["ord"], "children": [{"name": "list"}]}
                ],
            }
        )
        assert spec.children[0].aliases == ("ord",)
        assert spec.children[0].children[0].name == "list"

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CommandSpec(name="")

    def test_extra_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CommandSpec.model_validate({"name": "x", "subcommands": []})

    def test_frozen(self) -> None:
        spec = CommandSpec(name="order")
        with pytest.raises(ValidationError):
            spec.name = "other"  # type: ignore[misc]

    def test_satisfies_command_node_protocol(self) -> None:
        assert isinstance(CommandSpec(name="order"), CommandNode)


class TestPathHelpers:
    """command_path / tool_name の導出。"""

    def test_command_path(self) -> None:
        assert to_command_path(["Order", "List"]) == "order:list"

    @pytest.mark.parametrize(
        ("segments", "expected"),
        [
            (["website", "list"], "website_list"),
            (["po-cart", "totals"], "po_cart_totals"),
            (["adobe-io-event", "check-configuration"], "adobe_io_event_check_configuration"),
            (["rest"], "rest"),
        ],
    )
    def test_tool_name(self, segments: list[str], expected: str) -> None:
        assert to_tool_name(segments) == expected


class TestLeafEntry:
    """LeafEntry.from_segments。"""

    def test_from_segments(self) -> None:
        leaf = LeafEntry.from_segments(["Store", "config", "list"])
        assert leaf.segments == ("Store", "config", "list")
        assert leaf.command_path == "store:config:list"
        assert leaf.tool_name == "Store_config_list"

    def test_empty_segments_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LeafEntry.from_segments([])
