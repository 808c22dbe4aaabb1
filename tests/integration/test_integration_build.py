"""End-to-end build over a realistic project tree."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from skillindex.cli.main import main

SKILLS = {
    "pdf": "---\nname: pdf\ndescription: Read and fill PDF forms\nlicense: Apache-2.0\n---\n# PDF\n",
    "brand-guidelines": "---\nname: Brand Guidelines\ndescription: Apply brand colors\n---\nUse the palette.\n",
    "draft": "---\nname: draft\n---\nNo description yet.\n",
}


@pytest.fixture()
def project_root(tmp_path: Path) -> Path:
    skills_dir = tmp_path / "public" / ".well-known" / "skills"
    for directory, text in SKILLS.items():
        (skills_dir / directory).mkdir(parents=True)
        (skills_dir / directory / "SKILL.md").write_text(text, encoding="utf-8")
    (skills_dir / "pdf" / "scripts").mkdir()
    (skills_dir / "pdf" / "scripts" / "fill_form.py").write_text("", encoding="utf-8")
    (skills_dir / "pdf" / "forms.md").write_text("", encoding="utf-8")
    (skills_dir / "shared").mkdir()
    (skills_dir / "shared" / "theme.css").write_text("", encoding="utf-8")
    return tmp_path


def test_build_end_to_end(project_root: Path, caplog: pytest.LogCaptureFixture) -> None:
    index_path = project_root / "public" / ".well-known" / "skills" / "index.json"

    with caplog.at_level(logging.WARNING):
        assert main(["build", "-r", str(project_root)]) == 0

    assert json.loads(index_path.read_text(encoding="utf-8")) == {
        "skills": [
            {
                "name": "Brand Guidelines",
                "description": "Apply brand colors",
                "files": ["SKILL.md"],
            },
            {
                "name": "pdf",
                "description": "Read and fill PDF forms",
                "files": ["SKILL.md", "forms.md", "scripts/fill_form.py"],
            },
        ]
    }
    warnings = [record.getMessage() for record in caplog.records if record.levelno == logging.WARNING]
    assert warnings == ["Skill draft missing required frontmatter (description)"]


def test_rebuild_is_idempotent(project_root: Path) -> None:
    index_path = project_root / "public" / ".well-known" / "skills" / "index.json"

    assert main(["build", "-r", str(project_root)]) == 0
    first = index_path.read_bytes()
    assert main(["build", "-r", str(project_root)]) == 0

    assert index_path.read_bytes() == first
