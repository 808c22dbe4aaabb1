"""Config data model for skill index builds."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

from skillindex.constants.config import DEFAULT_CONFIG_SKILLS_DIR, DEFAULT_HOST, DEFAULT_PORT
from skillindex.constants.discovery import INDEX_FILENAME


@dataclass(frozen=True)
class SkillIndexConfig:
    """Resolved index config.

    Relative ``skills_dir`` and ``output`` values are resolved against ``root``.
    """

    root: Path = Path(".")
    skills_dir: str = DEFAULT_CONFIG_SKILLS_DIR
    output: str | None = None
    indent: int | None = None
    fail_on_unreadable_bundles: bool = False
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @property
    def skills_path(self) -> Path:
        """Absolute skills root directory."""
        return self.root / self.skills_dir

    @property
    def output_path(self) -> Path:
        """Where ``skillindex build`` writes the index by default."""
        if self.output is None:
            return self.skills_path / INDEX_FILENAME
        return self.root / self.output

    def with_overrides(self, **overrides: object) -> SkillIndexConfig:
        """Return a copy with every non-``None`` override applied."""
        applied = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **applied)  # type: ignore[arg-type]
