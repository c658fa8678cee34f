"""全ドメインモデルの基底クラスと共通ユーティリティ。

extra="forbid" と frozen=True で厳格かつ不変なモデルを一元管理する。
設定ファイル由来の列挙値は normalize_enum_value で大文字小文字を吸収する。
"""

from enum import StrEnum
from typing import TypeVar

from pydantic import BaseModel, ConfigDict


class MichishirubeBaseModel(BaseModel):
    """全ドメインモデルの基底クラス。extra="forbid" で厳格モードを一元管理。"""

    model_config = ConfigDict(extra="forbid", frozen=True)


E = TypeVar("E", bound=StrEnum)


def normalize_enum_value(v: object, enum_cls: type[E]) -> object:
    """StrEnum 入力を大文字小文字非依存で正規の値文字列に変換する。

    マッチしない str や str 以外の入力はそのまま返し、
    後続の Pydantic バリデーションに委ねる。
    """
    if isinstance(v, str):
        folded = v.strip().lower()
        for member in enum_cls:
            if folded == member.value.lower():
                return member.value
    return v
