"""コマンドツリーのソース。

公開 API:
    - 定義ファイル: CommandTreeLoadError, load_command_tree
    - ライブツリー: ClickCommandNode, from_typer
"""

from michishirube.tree._click import ClickCommandNode, from_typer
from michishirube.tree._loader import CommandTreeLoadError, load_command_tree

__all__ = [
    "ClickCommandNode",
    "CommandTreeLoadError",
    "from_typer",
    "load_command_tree",
]
