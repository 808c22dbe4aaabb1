"""Parsing-related exceptions."""

from __future__ import annotations

from skillindex.exceptions.base import SkillIndexError


class SkillParseError(SkillIndexError, ValueError):
    """Raised when a SKILL.md file cannot be parsed."""


class SkillMetadataError(SkillParseError):
    """Raised when SKILL.md front matter lacks required fields."""

    def __init__(self, message: str, *, missing_fields: tuple[str, ...]) -> None:
        super().__init__(message)
        self.missing_fields = missing_fields
