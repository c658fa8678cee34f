"""設定管理モデル。

設定項目の定義とバリデーション仕様。全レイヤーのマージ後に一度だけ構築される。
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Annotated, Final

from pydantic import Field, StringConstraints, field_validator

from michishirube.models._base import MichishirubeBaseModel, normalize_enum_value

DEFAULT_PROGRAM_NAME: Final[str] = "michishirube"

GROUP_NAME_PATTERN: Final[str] = r"^[a-z0-9][a-z0-9_-]*$"
"""グループ名のバリデーションパターン。大文字小文字は区別しない。"""

_GROUP_NAME_RE: re.Pattern[str] = re.compile(GROUP_NAME_PATTERN, re.IGNORECASE)

GroupEntry = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class OutputFormat(StrEnum):
    """一覧表示の出力形式。"""

    TEXT = "text"
    JSON = "json"


class MichishirubeConfig(MichishirubeBaseModel):
    """全設定項目を統合した不変モデル。

    デフォルト値のみで有効なインスタンスを構築可能。
    groups はデフォルトのグループテーブルに対する上書き分のみを保持する。
    """

    # 解決設定
    program_name: str = Field(default=DEFAULT_PROGRAM_NAME, min_length=1)
    command_tree: str | None = Field(default=None, min_length=1)

    # ポリシー設定
    include: str | None = None
    exclude: str | None = None
    groups: dict[str, tuple[GroupEntry, ...]] = Field(default_factory=dict)

    # 出力設定
    output_format: OutputFormat = OutputFormat.TEXT

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_output_format(cls, v: object) -> object:
        """出力形式を大文字小文字非依存で受け付ける。"""
        return normalize_enum_value(v, OutputFormat)

    @field_validator("groups")
    @classmethod
    def validate_group_names(
        cls, v: dict[str, tuple[str, ...]]
    ) -> dict[str, tuple[str, ...]]:
        """グループ名の形式を検証する。"""
        for name in v:
            if not _GROUP_NAME_RE.fullmatch(name):
                msg = (
                    f"Invalid group name '{name}': "
                    f"must match pattern {GROUP_NAME_PATTERN}"
                )
                raise ValueError(msg)
        return v
