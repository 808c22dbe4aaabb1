"""Config file validation for skill index builds."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from skillindex.constants.config import CONFIG_FILENAME
from skillindex.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    KEY_SUGGESTION_CUTOFF,
    OPTIONAL_STRING_KEYS,
    PORT_MAX,
    PORT_MIN,
)
from skillindex.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a skillindex.yaml file and return all validation errors.

    Never raises; every problem is returned as a :class:`ValidationError`.
    """
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            return [
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            ]
        return []

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        return [
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message="invalid YAML",
                hint=str(getattr(exc, "problem", "") or ""),
                line=mark.line + 1 if mark is not None else None,
                column=mark.column + 1 if mark is not None else None,
            )
        ]

    if raw is None:
        return []

    if not isinstance(raw, dict):
        return [
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        ]

    return validate_config_mapping(raw, path_str)


def validate_config_mapping(raw: dict[str, Any], path_str: str) -> list[ValidationError]:
    """Validate an already-parsed config mapping. ``None`` values mean unset."""
    errors: list[ValidationError] = []

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    for key in OPTIONAL_STRING_KEYS:
        val = raw.get(key)
        if val is not None and (not isinstance(val, str) or not val.strip()):
            errors.append(_type_error(path_str, key, "expected a non-empty string"))

    strict = raw.get("fail_on_unreadable_bundles")
    if strict is not None and not isinstance(strict, bool):
        errors.append(_type_error(path_str, "fail_on_unreadable_bundles", "expected a boolean"))

    indent = raw.get("indent")
    if indent is not None:
        if isinstance(indent, bool) or not isinstance(indent, int):
            errors.append(_type_error(path_str, "indent", "expected a non-negative integer"))
        elif indent < 0:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="indent",
                    message=f"`indent` must be a non-negative integer, got {indent}",
                )
            )

    port = raw.get("port")
    if port is not None:
        if isinstance(port, bool) or not isinstance(port, int):
            errors.append(_type_error(path_str, "port", "expected an integer"))
        elif not PORT_MIN <= port <= PORT_MAX:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field="port",
                    message=f"`port` must be between {PORT_MIN} and {PORT_MAX}, got {port}",
                )
            )

    return errors


def _type_error(path_str: str, key: str, hint: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=key,
        message=f"invalid type for `{key}`",
        hint=hint,
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=KEY_SUGGESTION_CUTOFF)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
