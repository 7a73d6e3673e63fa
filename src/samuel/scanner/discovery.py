"""Locate skill directories under a skills root."""

from __future__ import annotations

import logging
from pathlib import Path

from samuel.constants.skill import DEFAULT_BODY_LINE_LIMIT, SKILL_MARKDOWN_FILENAME
from samuel.exceptions import SkillNotFoundError
from samuel.model import SkillInfo
from samuel.validation import load_skill_info

logger = logging.getLogger(__name__)


def discover_skill_dirs(skills_dir: Path) -> list[Path]:
    """Return immediate, non-hidden subdirectories that contain a SKILL.md, sorted by name."""
    if not skills_dir.is_dir():
        logger.debug("Skills directory %s does not exist", skills_dir)
        return []

    discovered: list[Path] = []
    for entry in skills_dir.iterdir():
        if entry.name.startswith(".") or not entry.is_dir():
            continue
        if not (entry / SKILL_MARKDOWN_FILENAME).is_file():
            logger.debug("Skipping %s: no %s", entry, SKILL_MARKDOWN_FILENAME)
            continue
        discovered.append(entry)

    return sorted(discovered, key=lambda path: path.name)


def resolve_skill_dir(skills_dir: Path, name: str) -> Path:
    """Return ``skills_dir/name``, raising :class:`SkillNotFoundError` if it is not a directory.

    ``name`` must be a single path component; ``..`` and separators never
    resolve outside ``skills_dir``.
    """
    skill_dir = skills_dir / name
    if name in {"", ".", ".."} or Path(name).name != name or not skill_dir.is_dir():
        raise SkillNotFoundError(f"skill '{name}' not found in {skills_dir}")
    return skill_dir


def load_all_skills(skills_dir: Path, *, body_line_limit: int = DEFAULT_BODY_LINE_LIMIT) -> list[SkillInfo]:
    """Load and validate every discovered skill."""
    return [load_skill_info(path, body_line_limit=body_line_limit) for path in discover_skill_dirs(skills_dir)]
