"""Core data models for skillindex."""

from .entities import SkillIndex, SkillMetadata, SkillRecord, SkippedSkill

__all__ = [
    "SkillIndex",
    "SkillMetadata",
    "SkillRecord",
    "SkippedSkill",
]
