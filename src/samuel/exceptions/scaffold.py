"""Exceptions raised while locating or creating skill directories."""

from __future__ import annotations

from samuel.exceptions.base import SamuelError


class AlreadyExistsError(SamuelError, FileExistsError):
    """Raised when a scaffold target directory already exists."""


class SkillNotFoundError(SamuelError, LookupError):
    """Raised when a named skill directory does not exist."""
