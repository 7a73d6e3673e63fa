"""Parsing-related exceptions."""

from __future__ import annotations

from samuel.constants.validation import FIELD_FRONTMATTER
from samuel.exceptions.skill import SkillFieldError


class MalformedFrontmatterError(SkillFieldError):
    """Raised when a SKILL.md frontmatter block cannot be parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, field=FIELD_FRONTMATTER)
