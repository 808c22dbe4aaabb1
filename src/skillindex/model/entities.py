"""Immutable entities produced by a single index build."""

from __future__ import annotations

from dataclasses import dataclass, field

from skillindex.types import JsonObject


@dataclass(frozen=True)
class SkillMetadata:
    """Required fields read from a SKILL.md header block."""

    name: str
    description: str


@dataclass(frozen=True)
class SkillRecord:
    """One discovered skill bundle."""

    name: str
    description: str
    files: tuple[str, ...]

    def to_dict(self) -> JsonObject:
        return {
            "name": self.name,
            "description": self.description,
            "files": list(self.files),
        }


@dataclass(frozen=True)
class SkippedSkill:
    """A bundle directory that was left out of the index with a warning."""

    directory: str
    reason: str


@dataclass(frozen=True)
class SkillIndex:
    """The discovery document: every valid bundle, ordered by name.

    ``skipped`` is diagnostic only and never serialized.
    """

    skills: tuple[SkillRecord, ...] = ()
    skipped: tuple[SkippedSkill, ...] = field(default=(), compare=False)

    def to_dict(self) -> JsonObject:
        return {"skills": [skill.to_dict() for skill in self.skills]}
