"""Configuration loading and validation for skill index builds."""

from __future__ import annotations

from skillindex.config.loader import load_config
from skillindex.config.model import SkillIndexConfig
from skillindex.config.validator import validate_config_file

__all__ = [
    "SkillIndexConfig",
    "load_config",
    "validate_config_file",
]
