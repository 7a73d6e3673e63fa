"""Project configuration loading and validation.

This package facade re-exports the public names so callers can use
``from samuel.config import ...``.
"""

from __future__ import annotations

from samuel.config.loader import find_config_path, load_config
from samuel.config.model import SamuelConfig
from samuel.config.validator import suggest_key, validate_config_file

__all__ = [
    "SamuelConfig",
    "find_config_path",
    "load_config",
    "suggest_key",
    "validate_config_file",
]
