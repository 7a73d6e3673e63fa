"""Tests for the skill directory validation orchestrator."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from samuel.scaffold import create_skill_scaffold
from samuel.validation import load_skill_info, validate_skill_dir


def test_created_skill_validates_cleanly(skills_dir: Path) -> None:
    skill_path = create_skill_scaffold(skills_dir, "my-skill")

    report = validate_skill_dir(skill_path)

    assert list(report) == []
    assert report.exit_code == 0


@pytest.mark.parametrize("name", ["a", "pdf-tool", "x1-y2-z3", "a" * 64])
def test_create_then_validate_round_trip(skills_dir: Path, name: str) -> None:
    assert len(validate_skill_dir(create_skill_scaffold(skills_dir, name))) == 0


def test_valid_fixture_passes(pdf_tool_dir: Path) -> None:
    report = validate_skill_dir(pdf_tool_dir)

    assert len(report) == 0
    assert report.exit_code == 0


def test_name_mismatch_fails_with_one_finding(pdf_tool_dir: Path) -> None:
    skill_md = pdf_tool_dir / "SKILL.md"
    skill_md.write_text(
        skill_md.read_text(encoding="utf-8").replace("name: pdf-tool", "name: pdf_tool"),
        encoding="utf-8",
    )

    report = validate_skill_dir(pdf_tool_dir)

    assert report.exit_code == 1
    assert [finding.code for finding in report] == ["NameMismatchError"]


def test_missing_skill_file(skills_dir: Path) -> None:
    empty = skills_dir / "empty-skill"
    empty.mkdir()

    report = validate_skill_dir(empty)

    assert [(finding.code, finding.field) for finding in report] == [("MissingSkillFileError", "SKILL.md")]
    assert report.exit_code == 1


def test_malformed_frontmatter_is_reported_as_error(skills_dir: Path) -> None:
    broken = skills_dir / "broken"
    broken.mkdir()
    (broken / "SKILL.md").write_text("---\nname: [broken\n---\nBody\n", encoding="utf-8")

    report = validate_skill_dir(broken)

    assert [(finding.code, finding.field) for finding in report] == [("MalformedFrontmatterError", "frontmatter")]
    assert report.exit_code == 1


def test_undecodable_skill_file_is_reported(skills_dir: Path) -> None:
    binary = skills_dir / "binary"
    binary.mkdir()
    (binary / "SKILL.md").write_bytes(b"---\nname: \xff\xfe\n---\n")

    report = validate_skill_dir(binary)

    assert [finding.code for finding in report] == ["MalformedFrontmatterError"]


def test_invalid_directory_name_is_reported_first(write_skill: Callable[..., Path]) -> None:
    skill_dir = write_skill("Bad_Skill", frontmatter="name: Bad_Skill\ndescription: d")

    report = validate_skill_dir(skill_dir)

    assert [finding.code for finding in report] == ["InvalidNameError"]
    assert "disallowed characters" in report.findings[0].message


def test_warnings_do_not_fail_validation(write_skill: Callable[..., Path]) -> None:
    skill_dir = write_skill("long-skill", body="\n".join(f"line {i}" for i in range(12)))

    report = validate_skill_dir(skill_dir, body_line_limit=10)

    assert [finding.severity for finding in report] == ["warning"]
    assert report.exit_code == 0


def test_load_skill_info_collects_structure(pdf_tool_dir: Path) -> None:
    info = load_skill_info(pdf_tool_dir)

    assert info.dir_name == "pdf-tool"
    assert info.metadata.name == "pdf-tool"
    assert info.metadata.metadata["category"] == "documents"
    assert info.has_scripts and info.has_references and not info.has_assets
    assert info.subdirectories == ("scripts/", "references/")
    assert info.body.startswith("# Pdf Tool")
    assert info.valid
