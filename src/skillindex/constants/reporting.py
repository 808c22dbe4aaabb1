"""Constants for index serialization and persistence."""

from __future__ import annotations

INDEX_TEMP_PREFIX: str = ".skillindex-"
INDEX_TEMP_SUFFIX: str = ".json.tmp"
COMPACT_SEPARATORS: tuple[str, str] = (",", ":")
