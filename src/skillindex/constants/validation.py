"""Stable validation error codes and allowed keys for config validation."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # value out of range
CFG007: str = "CFG007"  # root directory not found

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "skills_dir",
        "output",
        "indent",
        "fail_on_unreadable_bundles",
        "host",
        "port",
    }
)

OPTIONAL_STRING_KEYS: tuple[str, ...] = ("skills_dir", "output", "host")

KEY_SUGGESTION_CUTOFF: float = 0.6
PORT_MIN: int = 1
PORT_MAX: int = 65535
