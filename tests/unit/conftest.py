"""単体テスト共通フィクスチャ。"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from michishirube.models.command import CommandSpec


@pytest.fixture
def grandchild() -> CommandSpec:
    """葉コマンド grandchild（エイリアス gc）。"""
    return CommandSpec(name="grandchild", aliases=("gc",))


@pytest.fixture
def child(grandchild: CommandSpec) -> CommandSpec:
    """grandchild を子に持つ child（エイリアス c）。"""
    return CommandSpec(name="child", aliases=("c",), children=(grandchild,))


@pytest.fixture
def root(child: CommandSpec) -> CommandSpec:
    """root → child(c) → grandchild(gc) のツリー。"""
    return CommandSpec(name="root", children=(child,))


@pytest.fixture
def root_with_chipmunk(child: CommandSpec) -> CommandSpec:
    """child と前方一致が衝突する兄弟 chipmunk を追加したツリー。"""
    return CommandSpec(name="root", children=(child, CommandSpec(name="chipmunk")))


@pytest.fixture
def isolated_user_config(tmp_path: Path) -> Iterator[Path]:
    """ユーザーグローバル設定を存在しないパスに差し替える。"""
    user_config = tmp_path / "nonexistent-home" / "config.toml"
    with patch(
        "michishirube.config._resolver.get_user_config_path",
        return_value=user_config,
    ):
        yield user_config
