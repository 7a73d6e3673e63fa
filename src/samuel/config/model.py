"""Config data model for Samuel."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from samuel.constants.config import (
    DEFAULT_BODY_LINE_LIMIT_CONFIG,
    DEFAULT_INSTRUCTIONS_FILE,
    DEFAULT_SKILLS_DIR,
)


@dataclass(frozen=True)
class SamuelConfig:
    """Resolved project config."""

    skills_dir: str = DEFAULT_SKILLS_DIR
    instructions_file: str = DEFAULT_INSTRUCTIONS_FILE
    body_line_limit: int = DEFAULT_BODY_LINE_LIMIT_CONFIG

    def skills_path(self, root: Path) -> Path:
        """Absolute skills directory for a project rooted at ``root``."""
        return (root / self.skills_dir).resolve()

    def instructions_path(self, root: Path) -> Path:
        """Absolute path of the instruction file holding the skills index."""
        return (root / self.instructions_file).resolve()
