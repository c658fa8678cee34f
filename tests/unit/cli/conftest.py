"""CLI テスト共通フィクスチャ。"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SHOP_TREE_TOML = """\
name = "shop"

[[children]]
name = "website"
children = [{ name = "list" }, { name = "show" }]

[[children]]
name = "order"
aliases = ["ord"]
children = [
    { name = "list", description = "List orders" },
    { name = "show" },
    { name = "cancel" },
]

[[children]]
name = "connection"
children = [{ name = "add" }, { name = "list" }]

[[children]]
name = "cart"
children = [{ name = "totals" }, { name = "create" }]

[[children]]
name = "customer"
children = [{ name = "list" }]
"""


@pytest.fixture
def workspace(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    isolated_user_config: Path,
) -> Path:
    """ユーザー設定を隔離し、tmp_path をカレントディレクトリにする。"""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def shop_tree(workspace: Path) -> Path:
    """shop コマンドツリーの TOML 定義ファイル。"""
    path = workspace / "shop.toml"
    path.write_text(SHOP_TREE_TOML, encoding="utf-8")
    return path


@pytest.fixture
def project_config(workspace: Path) -> Callable[[str], Path]:
    """workspace に .michishirube/config.toml を書き込む関数を返す。"""

    def write(content: str) -> Path:
        path = workspace / ".michishirube" / "config.toml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return write
