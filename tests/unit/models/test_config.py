"""MichishirubeConfig のテスト。"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from michishirube.models.config import (
    DEFAULT_PROGRAM_NAME,
    MichishirubeConfig,
    OutputFormat,
)


class TestMichishirubeConfigDefaults:
    """デフォルト値のみで構築できる。"""

    def test_defaults(self) -> None:
        config = MichishirubeConfig()
        assert config.program_name == DEFAULT_PROGRAM_NAME
        assert config.command_tree is None
        assert config.include is None
        assert config.exclude is None
        assert config.groups == {}
        assert config.output_format == OutputFormat.TEXT


class TestMichishirubeConfigValidation:
    """各フィールドのバリデーション。"""

    def test_output_format_from_string(self) -> None:
        config = MichishirubeConfig(output_format="json")  # type: ignore[arg-type]
        assert config.output_format is OutputFormat.JSON

    def test_invalid_output_format(self) -> None:
        with pytest.raises(ValidationError):
            MichishirubeConfig(output_format="yaml")  # type: ignore[arg-type]

    def test_empty_program_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MichishirubeConfig(program_name="")

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValidationError, match="extra_forbidden"):
            MichishirubeConfig(includes="@safe")  # type: ignore[call-arg]

    def test_groups_list_becomes_tuple(self) -> None:
        config = MichishirubeConfig(groups={"mine": [" order:* ", "@read"]})  # type: ignore[dict-item]
        assert config.groups == {"mine": ("order:*", "@read")}

    def test_empty_group_entry_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MichishirubeConfig(groups={"mine": ("   ",)})

    @pytest.mark.parametrize("name", ["Sales-Ops", "b2b", "my_group", "9lives"])
    def test_valid_group_names(self, name: str) -> None:
        config = MichishirubeConfig(groups={name: ("order:*",)})
        assert name in config.groups

    @pytest.mark.parametrize("name", ["", "-lead", "has space", "@ref", "a:b"])
    def test_invalid_group_names(self, name: str) -> None:
        with pytest.raises(ValidationError, match="Invalid group name"):
            MichishirubeConfig(groups={name: ("order:*",)})

    def test_frozen(self) -> None:
        config = MichishirubeConfig()
        with pytest.raises(ValidationError):
            config.include = "@risky"  # type: ignore[misc]

    def test_output_format_case_insensitive(self) -> None:
        config = MichishirubeConfig(output_format="JSON")  # type: ignore[arg-type]
        assert config.output_format is OutputFormat.JSON
