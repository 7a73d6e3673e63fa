"""Skill layout constants and field limits."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
SCRIPTS_DIRNAME: str = "scripts"
REFERENCES_DIRNAME: str = "references"
ASSETS_DIRNAME: str = "assets"
SKILL_SUBDIRECTORIES: tuple[str, ...] = (SCRIPTS_DIRNAME, REFERENCES_DIRNAME, ASSETS_DIRNAME)

MAX_DESCRIPTION_LENGTH: int = 1024
MAX_COMPATIBILITY_LENGTH: int = 500
DEFAULT_BODY_LINE_LIMIT: int = 500

SCAFFOLD_TEMP_PREFIX: str = ".tmp-skill-"
DEFAULT_LICENSE: str = "MIT"
DEFAULT_AUTHOR: str = "your-name"
DEFAULT_VERSION: str = "1.0"
