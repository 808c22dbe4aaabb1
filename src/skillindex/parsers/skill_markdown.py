"""Parser for SKILL.md front matter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skillindex.constants.parsing import (
    BYTE_ORDER_MARK,
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
    REQUIRED_METADATA_FIELDS,
)
from skillindex.exceptions import SkillMetadataError, SkillParseError
from skillindex.model import SkillMetadata


def parse_frontmatter(text: str, *, source: str = "<string>") -> dict[str, Any]:
    """Return the YAML header mapping at the top of *text*.

    Text without a leading ``---`` line has no header and yields an empty
    mapping. The body after the closing delimiter is ignored.
    """
    lines = text.lstrip(BYTE_ORDER_MARK).splitlines()
    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        return {}

    frontmatter_end = _find_frontmatter_end(lines)
    if frontmatter_end is None:
        raise SkillParseError(f"Unterminated frontmatter block in {source}")

    frontmatter_text = "\n".join(lines[1:frontmatter_end])
    if not frontmatter_text.strip():
        return {}

    try:
        payload = yaml.safe_load(frontmatter_text)
    except yaml.YAMLError as exc:
        raise SkillParseError(f"Failed to parse frontmatter in {source}: {exc}") from exc

    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise SkillParseError(f"Frontmatter in {source} must be a YAML mapping")
    return payload


def read_skill_metadata(path: Path) -> SkillMetadata:
    """Read *path* and extract the required ``name`` and ``description`` fields.

    ``FileNotFoundError`` and other ``OSError`` subclasses propagate so callers
    can tell a missing file apart from a malformed one.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SkillParseError(f"{path} is not valid UTF-8: {exc}") from exc

    frontmatter = parse_frontmatter(text, source=str(path))
    values = {key: _coerce_field(frontmatter.get(key)) for key in REQUIRED_METADATA_FIELDS}
    missing = tuple(key for key, value in values.items() if value is None)
    if missing:
        raise SkillMetadataError(
            f"{path} missing required frontmatter ({'/'.join(missing)})",
            missing_fields=missing,
        )

    return SkillMetadata(name=values["name"], description=values["description"])


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None


def _coerce_field(value: Any) -> str | None:
    # Numbers and dates are rendered as text; booleans and collections never count.
    if value is None or isinstance(value, (bool, dict, list)):
        return None
    text = value if isinstance(value, str) else str(value)
    return text if text.strip() else None
