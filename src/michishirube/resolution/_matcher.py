"""単一トークンの解決。

親ノードの子コマンドに対し、完全一致・前方一致・エイリアス前方一致で
トークンを解決する。比較は全て大文字小文字を区別しない。
"""

from __future__ import annotations

from dataclasses import dataclass

from michishirube.models.command import CommandNode


@dataclass(frozen=True)
class CommandMatch:
    """トークン解決結果。

    Attributes:
        match: 一意に解決されたノード。解決できない場合は None。
        matches: 候補となった全ノード。曖昧性の診断に使用する。
    """

    match: CommandNode | None
    matches: tuple[CommandNode, ...]

    @property
    def is_ambiguous(self) -> bool:
        """候補が2件以上ある場合 True。"""
        return len(self.matches) > 1


def resolve_command_match(parent: CommandNode, token: str) -> CommandMatch:
    """parent の子コマンドから token に一致するものを探す。

    評価ロジック:
    1. name が token と完全一致する子があれば、それを唯一の候補として返す。
       他の子が同じ文字列で始まっていても完全一致が常に優先される。
    2. それ以外は name またはいずれかの alias が token で始まる子を全て候補とする。
    3. 候補がちょうど1件の場合のみ match に設定する。

    Args:
        parent: 解決対象の親ノード。
        token: 解決するトークン。

    Returns:
        CommandMatch: 一意な一致ノードと全候補。
    """
    token_lower = token.lower()

    for child in parent.children:
        if child.name.lower() == token_lower:
            return CommandMatch(match=child, matches=(child,))

    matches = tuple(
        child
        for child in parent.children
        if child.name.lower().startswith(token_lower)
        or any(alias.lower().startswith(token_lower) for alias in child.aliases)
    )
    return CommandMatch(
        match=matches[0] if len(matches) == 1 else None,
        matches=matches,
    )
