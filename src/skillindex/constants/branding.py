"""CLI-facing product text."""

from __future__ import annotations

CLI_DESCRIPTION: str = """\
skillindex builds a discovery index for agent skill bundles.

Each immediate subdirectory of the skills directory holding a SKILL.md with
`name` and `description` front matter becomes one entry in index.json.
"""
