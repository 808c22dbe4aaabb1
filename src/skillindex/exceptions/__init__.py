"""Shared exception hierarchy for skillindex."""

from __future__ import annotations

from .base import SkillIndexError
from .config import ConfigError
from .parsing import SkillMetadataError, SkillParseError

__all__ = [
    "ConfigError",
    "SkillIndexError",
    "SkillMetadataError",
    "SkillParseError",
]
