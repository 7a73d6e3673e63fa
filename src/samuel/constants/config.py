"""Configuration defaults and filenames."""

from __future__ import annotations

from samuel.constants.skill import DEFAULT_BODY_LINE_LIMIT

CONFIG_FILENAME: str = "samuel.yaml"
ALT_CONFIG_FILENAME: str = ".samuel.yaml"
CONFIG_FILENAMES: tuple[str, ...] = (CONFIG_FILENAME, ALT_CONFIG_FILENAME)

DEFAULT_SKILLS_DIR: str = ".claude/skills"
DEFAULT_INSTRUCTIONS_FILE: str = "CLAUDE.md"
DEFAULT_BODY_LINE_LIMIT_CONFIG: int = DEFAULT_BODY_LINE_LIMIT
