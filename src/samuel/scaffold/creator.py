"""Create new skill directories on disk."""

from __future__ import annotations

import logging
import shutil
import stat
import tempfile
from contextlib import suppress
from pathlib import Path

from samuel.constants.skill import (
    SCAFFOLD_TEMP_PREFIX,
    SKILL_MARKDOWN_FILENAME,
    SKILL_SUBDIRECTORIES,
)
from samuel.exceptions import AlreadyExistsError
from samuel.scaffold.template import render_skill_template
from samuel.utils import check_skill_name

logger = logging.getLogger(__name__)


def create_skill_scaffold(parent: Path, name: str, *, author: str | None = None) -> Path:
    """Create ``parent/name`` with a templated SKILL.md and empty subdirectories.

    The target is reserved with ``mkdir`` first, then the tree is assembled in
    a hidden staging directory next to it and renamed over the empty
    reservation, so a failure part-way leaves nothing behind.

    Raises:
        InvalidNameError: ``name`` breaks the naming rules.
        AlreadyExistsError: ``parent/name`` already exists.
        OSError: the filesystem refused a write.
    """
    check_skill_name(name)
    target = parent / name

    parent.mkdir(parents=True, exist_ok=True)
    try:
        target.mkdir()
    except FileExistsError as exc:
        raise AlreadyExistsError(f"skill '{name}' already exists at {target}") from exc

    staging: Path | None = None
    try:
        staging = Path(tempfile.mkdtemp(prefix=SCAFFOLD_TEMP_PREFIX, dir=parent))
        logger.debug("Staging scaffold for %s in %s", name, staging)
        content = render_skill_template(name) if author is None else render_skill_template(name, author=author)
        (staging / SKILL_MARKDOWN_FILENAME).write_text(content, encoding="utf-8")
        for subdir in SKILL_SUBDIRECTORIES:
            (staging / subdir).mkdir()
        # mkdtemp creates 0o700; take the umask-derived mode of the reservation.
        staging.chmod(stat.S_IMODE(target.stat().st_mode))
        staging.rename(target)
    except Exception:
        if staging is not None:
            shutil.rmtree(staging, ignore_errors=True)
        with suppress(OSError):
            target.rmdir()
        raise

    logger.debug("Created skill scaffold at %s", target)
    return target
