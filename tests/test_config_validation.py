"""Tests for config validation (error codes, messages, ordering)."""

from __future__ import annotations

from pathlib import Path

import pytest

from skillindex.config import validate_config_file
from skillindex.config.validator import _suggest_key
from skillindex.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
)
from skillindex.exceptions.validation import ValidationError, format_errors, sort_errors
from skillindex.validation import preflight_validate


def _write_config(root: Path, text: str) -> Path:
    path = root / "skillindex.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def _codes(errors: list[ValidationError]) -> list[str]:
    return [error.code for error in errors]


def test_missing_implicit_config_is_valid(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_config_is_cfg001(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "custom.yaml", config_explicit=True)

    assert _codes(errors) == [CFG001]


def test_invalid_yaml_is_cfg002_with_location(tmp_path: Path) -> None:
    _write_config(tmp_path, "skills_dir: ok\nindent: [1\n")

    (error,) = validate_config_file(tmp_path)

    assert error.code == CFG002
    assert error.line is not None
    assert error.format().startswith(f"[{CFG002}] {error.path}:{error.line}")


def test_non_mapping_is_cfg003(tmp_path: Path) -> None:
    _write_config(tmp_path, "just a string\n")

    assert _codes(validate_config_file(tmp_path)) == [CFG003]


def test_unknown_key_is_cfg004_with_hint(tmp_path: Path) -> None:
    _write_config(tmp_path, "ouptut: index.json\n")

    (error,) = validate_config_file(tmp_path)

    assert error.code == CFG004
    assert error.field == "ouptut"
    assert error.hint == "did you mean `output`?"


@pytest.mark.parametrize(
    "text",
    [
        "skills_dir: 3\n",
        "output: ''\n",
        "host: [a]\n",
        "fail_on_unreadable_bundles: 'yes'\n",
        "indent: 2.5\n",
        "port: '8080'\n",
        "port: true\n",
    ],
)
def test_wrong_types_are_cfg005(tmp_path: Path, text: str) -> None:
    _write_config(tmp_path, text)

    assert _codes(validate_config_file(tmp_path)) == [CFG005]


@pytest.mark.parametrize("text", ["indent: -1\n", "port: 0\n", "port: 70000\n"])
def test_out_of_range_values_are_cfg006(tmp_path: Path, text: str) -> None:
    _write_config(tmp_path, text)

    assert _codes(validate_config_file(tmp_path)) == [CFG006]


def test_null_values_mean_unset(tmp_path: Path) -> None:
    _write_config(tmp_path, "skills_dir:\noutput: null\nindent: ~\nport:\n")

    assert validate_config_file(tmp_path) == []


def test_all_errors_are_collected(tmp_path: Path) -> None:
    _write_config(tmp_path, "extra: 1\nindent: -3\nport: nope\n")

    errors = sort_errors(validate_config_file(tmp_path))

    assert _codes(errors) == [CFG004, CFG005, CFG006]
    assert len(format_errors(errors).splitlines()) == 3


def test_preflight_reports_missing_root(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "missing")

    assert _codes(errors) == [CFG007]


def test_preflight_passes_for_clean_root(tmp_path: Path) -> None:
    assert preflight_validate(tmp_path) == []


def test_suggest_key_without_close_match() -> None:
    assert _suggest_key("zzzz", ALLOWED_CONFIG_KEYS) == ""


def test_validation_error_format_with_column() -> None:
    error = ValidationError(
        code=CFG002,
        path="skillindex.yaml",
        field="",
        message="invalid YAML",
        hint="expected ']'",
        line=3,
        column=7,
    )

    assert error.format() == "[CFG002] skillindex.yaml:3:7 invalid YAML (expected ']')"
