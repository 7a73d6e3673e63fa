"""Config loading and normalization for Samuel."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from samuel.config.model import SamuelConfig
from samuel.constants.config import (
    CONFIG_FILENAMES,
    DEFAULT_BODY_LINE_LIMIT_CONFIG,
    DEFAULT_INSTRUCTIONS_FILE,
    DEFAULT_SKILLS_DIR,
)
from samuel.exceptions import ConfigError

logger = logging.getLogger(__name__)


def find_config_path(root: Path) -> Path | None:
    """Return the first of ``samuel.yaml``/``.samuel.yaml`` present in ``root``."""
    for filename in CONFIG_FILENAMES:
        candidate = root / filename
        if candidate.is_file():
            return candidate
    return None


def load_config(root: Path, config_path: Path | None = None) -> SamuelConfig:
    """Load and validate project config from ``samuel.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else find_config_path(root)
    if path is None:
        logger.debug("No config file in %s, using defaults", root)
        return SamuelConfig()
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    body_line_limit = raw.get("body_line_limit", DEFAULT_BODY_LINE_LIMIT_CONFIG)
    if isinstance(body_line_limit, bool) or not isinstance(body_line_limit, int) or body_line_limit <= 0:
        raise ConfigError("body_line_limit must be a positive integer")

    logger.debug("Loaded config from %s", path)
    return SamuelConfig(
        skills_dir=_ensure_string(raw.get("skills_dir", DEFAULT_SKILLS_DIR), "skills_dir"),
        instructions_file=_ensure_string(
            raw.get("instructions_file", DEFAULT_INSTRUCTIONS_FILE),
            "instructions_file",
        ),
        body_line_limit=body_line_limit,
    )


def _ensure_string(value: Any, key_name: str) -> str:
    """Require a non-empty string, raising ConfigError on type mismatch."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()
