"""設定リゾルバー。

5層の設定ソースを階層解決し、項目単位でマージする。
CLI オプションの None 値は未指定として除外する。
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from michishirube.config._loader import load_pyproject_config, load_toml_config
from michishirube.config._locator import get_user_config_path, locate_project
from michishirube.models.config import MichishirubeConfig
from michishirube.policy import merge_command_groups

_GROUPS_KEY: str = "groups"


def _merge_groups(
    base: dict[str, object] | None,
    override: dict[str, object],
) -> dict[str, object]:
    """groups セクションをグループ名単位でマージする。

    グループ名は大文字小文字を区別せず、後のレイヤーのエントリ列が丸ごと置き換わる。

    Args:
        base: 既存の groups 辞書。None の場合は空として扱う。
        override: 上書きする groups 辞書。

    Returns:
        マージ済みの groups 辞書（キーは小文字）。

    Raises:
        TypeError: グループのエントリがリストでない場合。
    """
    for group_name, entries in override.items():
        if not isinstance(entries, (list, tuple)):
            msg = (
                f"Entries for group '{group_name}' must be a list, "
                f"got {type(entries).__name__}"
            )
            raise TypeError(msg)
    merged: dict[str, object] = {
        name.lower(): entries for name, entries in (base or {}).items()
    }
    for group_name, entries in override.items():
        merged[group_name.lower()] = entries
    return merged


def merge_config_layers(
    *layers: dict[str, object] | None,
) -> dict[str, object]:
    """複数の設定レイヤーを項目単位でマージする。

    後のレイヤーが先のレイヤーを上書きする。groups セクションはグループ名単位で
    マージする。None のレイヤーはスキップされる。

    Args:
        layers: マージ対象の設定辞書。低優先度から高優先度の順。

    Returns:
        マージ済みの設定辞書。

    Raises:
        TypeError: groups セクションが dict でない場合。
    """
    result: dict[str, object] = {}
    for layer in layers:
        if layer is None:
            continue
        for key, value in layer.items():
            if key == _GROUPS_KEY:
                if not isinstance(value, dict):
                    msg = f"'{_GROUPS_KEY}' must be a dict, got {type(value).__name__}"
                    raise TypeError(msg)
                result[_GROUPS_KEY] = _merge_groups(
                    result.get(_GROUPS_KEY, None),  # type: ignore[arg-type]
                    value,
                )
            else:
                result[key] = value
    return result


def filter_cli_overrides(cli_options: dict[str, object]) -> dict[str, object]:
    """CLI オプション辞書から None 値（未指定）を除外する。"""
    return {k: v for k, v in cli_options.items() if v is not None}


def resolve_config(
    start_dir: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> MichishirubeConfig:
    """5層の設定ソースを解決し MichishirubeConfig を構築する。

    優先順位: CLI > .michishirube/config.toml > pyproject.toml [tool.michishirube]
              > ~/.config/michishirube/config.toml > デフォルト値

    設定ファイルが存在しない場合は該当レイヤーをスキップする。

    Args:
        start_dir: 探索開始ディレクトリ。None の場合はカレントディレクトリ。
        cli_overrides: CLI オプションの辞書。None 値は未指定扱い。

    Returns:
        解決済みの MichishirubeConfig インスタンス。

    Raises:
        pydantic.ValidationError: マージ後の設定が不正な場合。
        tomllib.TOMLDecodeError: 設定ファイルの TOML 構文が不正な場合。
        PermissionError: 設定ファイルの読み取り権限がない場合。
        TypeError: groups セクションの型が不正な場合。
    """
    effective_start = start_dir if start_dir is not None else Path.cwd()
    location = locate_project(effective_start)

    # Layer 1 (最低優先): ユーザーグローバル設定
    user_layer: dict[str, object] | None = None
    try:
        user_layer = load_toml_config(get_user_config_path())
    except FileNotFoundError:
        pass

    # Layer 2: pyproject.toml [tool.michishirube]
    pyproject_layer: dict[str, object] | None = None
    if location.pyproject is not None:
        pyproject_layer = load_pyproject_config(location.pyproject)

    # Layer 3: .michishirube/config.toml
    config_layer: dict[str, object] | None = None
    config_path = location.config_file
    if config_path is not None:
        # .michishirube/ はあるが config.toml が未作成のケース
        try:
            config_layer = load_toml_config(config_path)
        except FileNotFoundError:
            pass

    # Layer 4 (最高優先): CLI overrides
    cli_layer: dict[str, object] | None = None
    if cli_overrides is not None:
        cli_layer = filter_cli_overrides(cli_overrides)

    merged = merge_config_layers(user_layer, pyproject_layer, config_layer, cli_layer)

    # Layer 5 (最低優先): デフォルト値 -- MichishirubeConfig のフィールドデフォルト
    return MichishirubeConfig(**merged)  # type: ignore[arg-type]


def resolve_group_table(
    config: MichishirubeConfig,
    defaults: Mapping[str, tuple[str, ...]],
) -> Mapping[str, tuple[str, ...]]:
    """デフォルトのグループテーブルに設定の groups を重ねたテーブルを返す。"""
    return merge_command_groups(defaults, config.groups)
