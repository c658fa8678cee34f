"""コマンドパスの略記展開。

対話シェルから入力された省略形・エイリアス・コロン連結のコマンドパスを、
ツリーの正規名によるトークン列に展開する。
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from michishirube.models.command import COMMAND_PATH_SEPARATOR, CommandNode
from michishirube.models.errors import AmbiguousCommandError
from michishirube.resolution._matcher import resolve_command_match

logger = logging.getLogger(__name__)

_FLAG_PREFIX: Final[str] = "-"
_ROOT_CONTEXT: Final[str] = "root"


def _context_path(
    path: Sequence[str], current: CommandNode, program_name: str | None
) -> str:
    """曖昧性エラーに表示する親コンテキストパスを構築する。

    トップレベルでは、ルートがプログラム自身（program_name 未指定を含む）なら
    "root"、そうでなければルートの name を返す。
    """
    if path:
        return " ".join(path)
    if program_name is None or current.name == program_name:
        return _ROOT_CONTEXT
    return current.name


def expand_command_abbreviations(
    root: CommandNode,
    tokens: Sequence[str],
    *,
    program_name: str | None = None,
) -> list[str]:
    """トークン列をコマンドツリーの正規名に展開する。

    左から順に走査し、各トークンを以下の規則で処理する:
    1. "-" で始まるトークン（フラグ）はそのまま出力する。現在ノードは変化しない。
    2. 現在ノードが子を持たない（葉コマンド）場合、残り全トークンを
       引数としてそのまま出力し走査を終了する。
    3. ":" を含むトークンは分割し、先頭部分が現在ノードで一意に解決できれば
       分割後の部分列でトークンを置き換え、同じ位置から再処理する。
       解決できなければ分割前のトークンを通常トークンとして扱う。
    4. 通常トークンは resolve_command_match で解決する。
       - 候補が複数: AmbiguousCommandError を送出する。
       - 候補なし: トークンをそのまま出力する。現在ノードは進めない
         （後続トークンも同じノードに対して評価される）。
       - 一意に解決: 正規名を出力し、現在ノードを一致ノードに進める。

    呼び出し元の tokens は変更しない。

    Args:
        root: コマンドツリーのルート。
        tokens: 空白・クォート分割済みの入力トークン列。
        program_name: プログラム名。曖昧性エラーのコンテキスト表示に使用する。

    Returns:
        展開済みトークン列。

    Raises:
        AmbiguousCommandError: トークンが複数の兄弟コマンドに前方一致した場合。
    """
    argv = list(tokens)
    expanded: list[str] = []
    path: list[str] = []
    current = root

    i = 0
    while i < len(argv):
        token = argv[i]

        if token.startswith(_FLAG_PREFIX):
            expanded.append(token)
            i += 1
            continue

        if not current.children:
            expanded.extend(argv[i:])
            break

        if COMMAND_PATH_SEPARATOR in token:
            parts = token.split(COMMAND_PATH_SEPARATOR)
            if resolve_command_match(current, parts[0]).match is not None:
                logger.debug("Splitting compound token %r into %r", token, parts)
                argv[i : i + 1] = parts
                continue

        result = resolve_command_match(current, token)
        if result.match is None:
            if result.is_ambiguous:
                raise AmbiguousCommandError(
                    token,
                    _context_path(path, current, program_name),
                    [node.name for node in result.matches],
                )
            logger.debug("Passing through unresolved token %r", token)
            expanded.append(token)
            i += 1
            continue

        expanded.append(result.match.name)
        path.append(result.match.name)
        current = result.match
        i += 1

    return expanded
