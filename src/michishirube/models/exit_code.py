"""ExitCode — 終了コードの定義。"""

from enum import IntEnum


class ExitCode(IntEnum):
    """プロセス終了コード。

    1 はコマンド解決の失敗（曖昧なトークン、未知・循環グループ）、
    2 は CLI 層固有の入力エラー（設定不正、コマンドツリー読み込み失敗）。
    """

    SUCCESS = 0
    RESOLUTION_ERROR = 1
    INPUT_ERROR = 2
