"""Field-level skill errors.

Each of these maps onto one finding in a validation report. Validators raise
them from individual checks and the orchestrator converts them with
:meth:`samuel.model.Finding.from_error`.
"""

from __future__ import annotations

from samuel.constants.skill import SKILL_MARKDOWN_FILENAME
from samuel.exceptions.base import SamuelError


class SkillFieldError(SamuelError, ValueError):
    """A skill problem attributable to a single field."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class InvalidNameError(SkillFieldError):
    """Raised when a skill name breaks one of the naming rules."""

    def __init__(self, message: str, *, name: str, rule: str) -> None:
        super().__init__(message, field="name")
        self.name = name
        self.rule = rule


class NameMismatchError(SkillFieldError):
    """Raised when the frontmatter ``name`` does not match the directory name."""

    def __init__(self, message: str, *, declared: object, expected: str) -> None:
        super().__init__(message, field="name")
        self.declared = declared
        self.expected = expected


class MissingFieldError(SkillFieldError):
    """Raised when a required frontmatter field is absent or empty."""


class FieldTooLongError(SkillFieldError):
    """Raised when a frontmatter field exceeds its length limit."""

    def __init__(self, message: str, *, field: str, length: int, limit: int) -> None:
        super().__init__(message, field=field)
        self.length = length
        self.limit = limit


class MissingSkillFileError(SkillFieldError):
    """Raised when a skill directory has no SKILL.md."""

    def __init__(self, message: str) -> None:
        super().__init__(message, field=SKILL_MARKDOWN_FILENAME)
