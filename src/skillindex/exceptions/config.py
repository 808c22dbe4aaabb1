"""Configuration-related exceptions."""

from __future__ import annotations

from skillindex.exceptions.base import SkillIndexError


class ConfigError(SkillIndexError, ValueError):
    """Raised when index configuration is invalid."""
