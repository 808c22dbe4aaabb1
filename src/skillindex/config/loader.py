"""Config loading and normalization for skill index builds."""

from __future__ import annotations

from pathlib import Path

import yaml

from skillindex.config.model import SkillIndexConfig
from skillindex.config.validator import validate_config_mapping
from skillindex.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_CONFIG_SKILLS_DIR,
    DEFAULT_HOST,
    DEFAULT_PORT,
)
from skillindex.exceptions import ConfigError
from skillindex.exceptions.validation import sort_errors


def load_config(root: Path, config_path: Path | None = None) -> SkillIndexConfig:
    """Load and validate config from ``skillindex.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillIndexConfig(root=root)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    errors = validate_config_mapping(raw, str(path))
    if errors:
        first = sort_errors(errors)[0]
        raise ConfigError(first.format())

    return SkillIndexConfig(
        root=root,
        skills_dir=raw.get("skills_dir") or DEFAULT_CONFIG_SKILLS_DIR,
        output=raw.get("output"),
        indent=raw.get("indent"),
        fail_on_unreadable_bundles=bool(raw.get("fail_on_unreadable_bundles", False)),
        host=raw.get("host") or DEFAULT_HOST,
        port=raw.get("port") or DEFAULT_PORT,
    )
