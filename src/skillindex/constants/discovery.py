"""Constants for skill bundle discovery and file enumeration."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
DEFAULT_SKILLS_DIR: str = "public/.well-known/skills"
INDEX_FILENAME: str = "index.json"
