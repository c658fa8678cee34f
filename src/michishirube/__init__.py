"""michishirube — コマンドツリーの略記解決とコマンド公開ポリシー。"""


def main() -> None:
    """パッケージエントリポイント。cli.main() に委譲する。

    pyproject.toml の [project.scripts] は michishirube.cli:main を直接参照するため、
    この関数はプログラムから michishirube.main() として呼び出す場合の互換用。
    """
    from michishirube.cli import main as cli_main

    cli_main()
