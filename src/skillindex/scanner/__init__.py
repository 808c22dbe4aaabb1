"""Skill bundle scanning."""

from .discovery import build_skill_index, list_bundle_dirs
from .files import collect_bundle_files, iter_bundle_files

__all__ = [
    "build_skill_index",
    "collect_bundle_files",
    "iter_bundle_files",
    "list_bundle_dirs",
]
