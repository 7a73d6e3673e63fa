"""Shared exception hierarchy for Samuel."""

from __future__ import annotations

from .base import SamuelError
from .config import ConfigError
from .parsing import MalformedFrontmatterError
from .scaffold import AlreadyExistsError, SkillNotFoundError
from .skill import (
    FieldTooLongError,
    InvalidNameError,
    MissingFieldError,
    MissingSkillFileError,
    NameMismatchError,
    SkillFieldError,
)

__all__ = [
    "AlreadyExistsError",
    "ConfigError",
    "FieldTooLongError",
    "InvalidNameError",
    "MalformedFrontmatterError",
    "MissingFieldError",
    "MissingSkillFileError",
    "NameMismatchError",
    "SamuelError",
    "SkillFieldError",
    "SkillNotFoundError",
]
