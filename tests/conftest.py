"""Shared pytest fixtures for building skill bundle trees."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

type MakeSkill = Callable[..., Path]


def skill_markdown(name: str | None = "demo", description: str | None = "Demo skill", body: str = "# Demo\n") -> str:
    """Render a SKILL.md with the given front-matter fields."""
    header = ["---"]
    if name is not None:
        header.append(f"name: {name}")
    if description is not None:
        header.append(f"description: {description}")
    header.append("---")
    return "\n".join(header) + "\n" + body


@pytest.fixture()
def skills_root(tmp_path: Path) -> Path:
    """Return an empty skills root directory."""
    root = tmp_path / "skills"
    root.mkdir()
    return root


@pytest.fixture()
def make_skill(skills_root: Path) -> MakeSkill:
    """Create a bundle directory with SKILL.md and optional extra files."""

    def _make(
        directory: str,
        *,
        name: str | None = "demo",
        description: str | None = "Demo skill",
        files: dict[str, str] | None = None,
        content: str | None = None,
    ) -> Path:
        bundle = skills_root / directory
        bundle.mkdir(parents=True, exist_ok=True)
        text = content if content is not None else skill_markdown(name, description)
        (bundle / "SKILL.md").write_text(text, encoding="utf-8")
        for relative, data in (files or {}).items():
            target = bundle / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(data, encoding="utf-8")
        return bundle

    return _make
