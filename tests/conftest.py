"""Shared pytest fixtures for repository-local test data."""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

SkillWriter: TypeAlias = Callable[..., Path]


@pytest.fixture(scope="session")
def fixtures_root() -> Path:
    """Return root directory for test fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def fixture_skills_root(fixtures_root: Path) -> Path:
    """Return the read-only fixture skills directory."""
    return fixtures_root / "skills"


@pytest.fixture()
def skills_dir(tmp_path: Path) -> Path:
    """Return an empty skills directory at the default project location."""
    path = tmp_path / ".claude" / "skills"
    path.mkdir(parents=True)
    return path


@pytest.fixture()
def pdf_tool_dir(fixture_skills_root: Path, skills_dir: Path) -> Path:
    """Copy the valid ``pdf-tool`` fixture into the temporary skills directory."""
    target = skills_dir / "pdf-tool"
    shutil.copytree(fixture_skills_root / "pdf-tool", target)
    return target


@pytest.fixture()
def write_skill(skills_dir: Path) -> SkillWriter:
    """Return a factory that writes ``<skills_dir>/<dir_name>/SKILL.md``."""

    def _write(dir_name: str, frontmatter: str | None = None, body: str = "# Title\n\nBody text.\n") -> Path:
        skill_dir = skills_dir / dir_name
        skill_dir.mkdir(parents=True, exist_ok=True)
        if frontmatter is None:
            frontmatter = f"name: {dir_name}\ndescription: A test skill."
        (skill_dir / "SKILL.md").write_text(f"---\n{frontmatter}\n---\n{body}", encoding="utf-8")
        return skill_dir

    return _write
