"""ワイルドカードパターンのコンパイル。"""

from __future__ import annotations

import re
from typing import Final

WILDCARD: Final[str] = "*"
_ESCAPED_WILDCARD: Final[str] = re.escape(WILDCARD)


def wildcard_to_regex(pattern: str) -> re.Pattern[str]:
    """ワイルドカードパターンを両端アンカー付きの正規表現にコンパイルする。

    末尾アンカーは "\\Z" を用いる（"$" は末尾の改行の直前にも一致するため）。

    "*" 以外の正規表現メタ文字は全てエスケープされ、"*" は任意の0文字以上に一致する。
    "*" は区切り文字を意識しないため "order:*" は "order:cancel:force" にも一致する。
    大文字小文字は区別する（呼び出し側で正規化済みであることを前提とする）。

    Args:
        pattern: 正規化済みワイルドカードパターン。

    Returns:
        コンパイル済み正規表現。不変で、複数パスの判定に再利用できる。
    """
    body = re.escape(pattern).replace(_ESCAPED_WILDCARD, ".*")
    return re.compile(rf"\A{body}\Z")
