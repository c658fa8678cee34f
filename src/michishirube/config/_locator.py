"""プロジェクト探索。

カレントから親方向に一度だけ遡り、.michishirube/ を含むプロジェクトルートと
pyproject.toml をまとめて特定する。両者は独立に探索され、それぞれ最も近い
祖先が採用される。
"""

from __future__ import annotations

import stat as stat_module
from dataclasses import dataclass
from pathlib import Path
from typing import Final

_PROJECT_DIR_NAME: Final[str] = ".michishirube"
_CONFIG_FILE_NAME: Final[str] = "config.toml"
_PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
_USER_CONFIG_DIR: Final[tuple[str, ...]] = (".config", "michishirube")


@dataclass(frozen=True)
class ProjectLocation:
    """探索結果。

    Attributes:
        start: 探索開始ディレクトリ（解決済み）。
        project_root: .michishirube/ を含むディレクトリ。見つからなければ None。
        pyproject: 最も近い pyproject.toml。見つからなければ None。
    """

    start: Path
    project_root: Path | None = None
    pyproject: Path | None = None

    @property
    def config_file(self) -> Path | None:
        """.michishirube/config.toml のパス。ファイルの存在は問わない。"""
        if self.project_root is None:
            return None
        return self.project_root / _PROJECT_DIR_NAME / _CONFIG_FILE_NAME

    def resolve_tree_path(self, command_tree: str) -> Path:
        """設定値 command_tree をコマンドツリー定義ファイルのパスに解決する。

        絶対パス（"~" 展開後）はそのまま返す。相対パスはプロジェクトルート基準、
        プロジェクトルートがなければ探索開始ディレクトリ基準で解決する。
        ファイルの存在チェックは行わない。
        """
        configured = Path(command_tree).expanduser()
        if configured.is_absolute():
            return configured
        base = self.project_root if self.project_root is not None else self.start
        return base / configured


def _stat_mode(path: Path) -> int | None:
    try:
        return path.stat().st_mode
    except FileNotFoundError:
        return None


def locate_project(start: Path) -> ProjectLocation:
    """start から親方向に遡り、プロジェクトルートと pyproject.toml を探索する。

    同名でも種別が異なるもの（ファイルの .michishirube、ディレクトリの
    pyproject.toml）は無視して探索を続ける。

    Args:
        start: 探索開始ディレクトリ。

    Returns:
        ProjectLocation。両方見つかった時点で探索を打ち切る。

    Raises:
        OSError: 探索パス上のアクセス権限エラー等。
    """
    origin = start.resolve()
    project_root: Path | None = None
    pyproject: Path | None = None
    for directory in (origin, *origin.parents):
        if project_root is None:
            mode = _stat_mode(directory / _PROJECT_DIR_NAME)
            if mode is not None and stat_module.S_ISDIR(mode):
                project_root = directory
        if pyproject is None:
            candidate = directory / _PYPROJECT_FILE_NAME
            mode = _stat_mode(candidate)
            if mode is not None and stat_module.S_ISREG(mode):
                pyproject = candidate
        if project_root is not None and pyproject is not None:
            break
    return ProjectLocation(start=origin, project_root=project_root, pyproject=pyproject)


def get_user_config_path() -> Path:
    """ユーザーグローバル設定ファイル ~/.config/michishirube/config.toml のパスを返す。

    Raises:
        RuntimeError: ホームディレクトリを特定できない場合。
    """
    return Path.home().joinpath(*_USER_CONFIG_DIR, _CONFIG_FILE_NAME)
