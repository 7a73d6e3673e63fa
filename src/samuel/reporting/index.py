"""Render and sync the "Available Skills" section of an instruction file."""

from __future__ import annotations

import logging
from pathlib import Path

from samuel.constants.config import DEFAULT_SKILLS_DIR
from samuel.constants.reporting import (
    INDEX_DESCRIPTION_MAX_LENGTH,
    INDEX_TEMP_PREFIX,
    INDEX_TEMP_SUFFIX,
    SKILLS_END_MARKER,
    SKILLS_SECTION_INTRO,
    SKILLS_SECTION_TITLE,
    SKILLS_START_MARKER,
)
from samuel.constants.skill import SKILL_MARKDOWN_FILENAME
from samuel.io import write_text_atomic
from samuel.model import SkillInfo
from samuel.reporting.formatting import one_line, truncate

logger = logging.getLogger(__name__)


def render_skills_section(skills: list[SkillInfo], *, skills_dir_label: str = DEFAULT_SKILLS_DIR) -> str:
    """Render a Markdown table of valid skills, or an empty string when there are none."""
    rows: list[str] = []
    for skill in skills:
        if not skill.valid:
            continue
        description = truncate(one_line(skill.metadata.description), INDEX_DESCRIPTION_MAX_LENGTH)
        escaped = description.replace("|", "\\|")
        rows.append(f"| {skill.metadata.name} | {escaped} |")

    if not rows:
        return ""

    usage_path = f"{skills_dir_label.rstrip('/')}/<skill-name>/{SKILL_MARKDOWN_FILENAME}"
    lines = [
        SKILLS_SECTION_TITLE,
        "",
        SKILLS_SECTION_INTRO,
        "",
        "| Skill | Description |",
        "|-------|-------------|",
        *rows,
        "",
        f"**To use a skill**: Read `{usage_path}`",
    ]
    return "\n".join(lines) + "\n"


def update_skills_section(
    path: Path,
    skills: list[SkillInfo],
    *,
    skills_dir_label: str = DEFAULT_SKILLS_DIR,
) -> bool:
    """Replace the text between the skills markers in ``path``.

    Returns ``True`` when the file was rewritten. Files without both markers,
    in order, are left untouched.
    """
    content = path.read_text(encoding="utf-8")
    if not has_skills_markers(content):
        logger.info("No skills markers in %s; leaving it unchanged", path)
        return False

    start = content.find(SKILLS_START_MARKER)
    end = content.find(SKILLS_END_MARKER, start)
    section = render_skills_section(skills, skills_dir_label=skills_dir_label)
    updated = content[:start] + SKILLS_START_MARKER + "\n" + section + content[end:]
    if updated == content:
        logger.debug("Skills section in %s already up to date", path)
        return False

    write_text_atomic(path=path, content=updated, temp_prefix=INDEX_TEMP_PREFIX, temp_suffix=INDEX_TEMP_SUFFIX)
    logger.debug("Rewrote skills section in %s", path)
    return True


def has_skills_markers(content: str) -> bool:
    """Return whether ``content`` holds a start marker followed by an end marker."""
    start = content.find(SKILLS_START_MARKER)
    return start != -1 and content.find(SKILLS_END_MARKER, start) != -1
