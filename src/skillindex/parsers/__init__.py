"""Parsers for skill bundle metadata."""

from .skill_markdown import parse_frontmatter, read_skill_metadata

__all__ = ["parse_frontmatter", "read_skill_metadata"]
