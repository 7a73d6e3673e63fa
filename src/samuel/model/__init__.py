"""Core data models for Samuel."""

from .entities import (
    Finding,
    ParsedSkillDocument,
    SkillInfo,
    SkillMetadata,
    ValidationReport,
)

__all__ = [
    "Finding",
    "ParsedSkillDocument",
    "SkillInfo",
    "SkillMetadata",
    "ValidationReport",
]
