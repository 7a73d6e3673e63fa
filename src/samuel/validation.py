"""Skill directory validation orchestrator.

Runs the name rules against the directory basename and the frontmatter
checks against its SKILL.md, producing a single :class:`ValidationReport`.
Both ``samuel skill validate`` and ``samuel skill info`` go through here.
"""

from __future__ import annotations

import logging
from pathlib import Path

from samuel.checks import validate_frontmatter
from samuel.constants.skill import (
    ASSETS_DIRNAME,
    DEFAULT_BODY_LINE_LIMIT,
    REFERENCES_DIRNAME,
    SCRIPTS_DIRNAME,
    SKILL_MARKDOWN_FILENAME,
)
from samuel.exceptions import InvalidNameError, MalformedFrontmatterError, MissingSkillFileError
from samuel.model import SkillInfo, ValidationReport
from samuel.parsers import parse_skill_markdown_file
from samuel.utils import check_skill_name

logger = logging.getLogger(__name__)


def load_skill_info(skill_dir: Path, *, body_line_limit: int = DEFAULT_BODY_LINE_LIMIT) -> SkillInfo:
    """Load, parse and validate one skill directory.

    Field problems and unparseable frontmatter become error findings on the
    returned report. Filesystem errors other than a missing SKILL.md propagate.
    """
    info = SkillInfo(
        path=skill_dir,
        dir_name=skill_dir.name,
        has_scripts=(skill_dir / SCRIPTS_DIRNAME).is_dir(),
        has_references=(skill_dir / REFERENCES_DIRNAME).is_dir(),
        has_assets=(skill_dir / ASSETS_DIRNAME).is_dir(),
    )

    try:
        check_skill_name(info.dir_name)
    except InvalidNameError as exc:
        info.report.record(exc)

    skill_md = skill_dir / SKILL_MARKDOWN_FILENAME
    if not skill_md.is_file():
        info.report.record(MissingSkillFileError(f"missing required file: {SKILL_MARKDOWN_FILENAME}"))
        return info

    try:
        document = parse_skill_markdown_file(skill_md)
    except MalformedFrontmatterError as exc:
        logger.debug("Unparseable frontmatter in %s: %s", skill_md, exc)
        info.report.record(exc)
        return info
    except UnicodeDecodeError as exc:
        logger.warning("Cannot decode %s as UTF-8: %s", skill_md, exc)
        info.report.record(MalformedFrontmatterError(f"{SKILL_MARKDOWN_FILENAME} is not valid UTF-8"))
        return info

    info.metadata = document.metadata
    info.body = document.body
    info.report.extend(validate_frontmatter(document, info.dir_name, body_line_limit=body_line_limit))
    return info


def validate_skill_dir(skill_dir: Path, *, body_line_limit: int = DEFAULT_BODY_LINE_LIMIT) -> ValidationReport:
    """Validate a skill directory and return its report.

    ``report.exit_code`` is 0 when no error-severity finding exists, 1 otherwise.
    """
    return load_skill_info(skill_dir, body_line_limit=body_line_limit).report
