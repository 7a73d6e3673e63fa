"""Configuration-related exceptions."""

from __future__ import annotations

from samuel.exceptions.base import SamuelError


class ConfigError(SamuelError, ValueError):
    """Raised when project configuration is invalid."""
