"""設定管理モジュール。"""

from michishirube.config._locator import ProjectLocation, locate_project
from michishirube.config._resolver import resolve_config, resolve_group_table

__all__ = [
    "ProjectLocation",
    "locate_project",
    "resolve_config",
    "resolve_group_table",
]
