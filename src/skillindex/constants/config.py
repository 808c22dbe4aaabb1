"""Configuration defaults and filenames."""

from __future__ import annotations

from skillindex.constants.discovery import DEFAULT_SKILLS_DIR

CONFIG_FILENAME: str = "skillindex.yaml"

DEFAULT_CONFIG_SKILLS_DIR: str = DEFAULT_SKILLS_DIR
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
