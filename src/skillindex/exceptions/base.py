"""Root exception type."""

from __future__ import annotations


class SkillIndexError(Exception):
    """Base class for all skillindex errors."""
