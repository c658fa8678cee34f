"""コマンド解決エラー。

解決エンジンが送出する失敗は3種類に閉じている。いずれも共通基底クラス
CommandResolutionError を継承し、kind タグで判別できる。
呼び出し元はクラスでも kind でも分岐できる。
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import ClassVar


class ResolutionErrorKind(StrEnum):
    """解決エラーの種別タグ。"""

    AMBIGUOUS_TOKEN = "ambiguous_token"
    UNKNOWN_GROUP = "unknown_group"
    CIRCULAR_GROUP_REFERENCE = "circular_group_reference"


class CommandResolutionError(Exception):
    """コマンド解決・パターン展開の失敗の基底クラス。

    出力を一切生成せずに送出されるため、呼び出し側でのロールバックは不要。
    """

    kind: ClassVar[ResolutionErrorKind]


class AmbiguousCommandError(CommandResolutionError):
    """トークンが複数の兄弟コマンドに前方一致した。

    呼び出し元はメッセージを表示して当該コマンドのみを中断し、
    セッションを継続できる。

    Attributes:
        token: 曖昧だったトークン。
        context: 親コンテキストパス（空白区切り）。トップレベルでは "root"。
        candidates: 候補コマンド名のソート済みタプル。
    """

    kind = ResolutionErrorKind.AMBIGUOUS_TOKEN

    def __init__(self, token: str, context: str, candidates: Sequence[str]) -> None:
        self.token = token
        self.context = context
        self.candidates = tuple(sorted(candidates))
        super().__init__(
            f'Ambiguous command "{token}" under "{context}". '
            f"Options: {', '.join(self.candidates)}."
        )


class UnknownGroupError(CommandResolutionError):
    """@name 参照に対応するグループがグループテーブルに存在しない。

    Attributes:
        token: 問題の参照トークン（"@" を含む元の表記）。
    """

    kind = ResolutionErrorKind.UNKNOWN_GROUP

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f'Unknown command group "{token}"')


class CircularGroupReferenceError(CommandResolutionError):
    """グループが推移的に自身を参照している。

    Attributes:
        chain: 最初の出現から再出現までのグループ名の列（例: ("a", "b", "a")）。
    """

    kind = ResolutionErrorKind.CIRCULAR_GROUP_REFERENCE

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(
            f"Circular command group reference: {' -> '.join(self.chain)}"
        )
