"""Tests for the Available Skills index section."""

from __future__ import annotations

from pathlib import Path

from samuel.constants.reporting import SKILLS_END_MARKER, SKILLS_START_MARKER
from samuel.model import Finding, SkillInfo, SkillMetadata, ValidationReport
from samuel.reporting import has_skills_markers, render_skills_section, update_skills_section


def _skill(name: str, description: str = "Does a thing.", *, valid: bool = True) -> SkillInfo:
    findings = [] if valid else [Finding(code="MissingFieldError", field="description", severity="error", message="x")]
    return SkillInfo(
        path=Path("/skills") / name,
        dir_name=name,
        metadata=SkillMetadata(name=name, description=description),
        report=ValidationReport(findings=findings),
    )


def test_render_skills_section_table() -> None:
    section = render_skills_section([_skill("alpha"), _skill("beta", "Multi\nline  text")])

    assert section.startswith("## Available Skills\n")
    assert "| Skill | Description |" in section
    assert "| alpha | Does a thing. |" in section
    assert "| beta | Multi line text |" in section
    assert section.endswith("**To use a skill**: Read `.claude/skills/<skill-name>/SKILL.md`\n")


def test_render_skills_section_skips_invalid_skills() -> None:
    section = render_skills_section([_skill("alpha"), _skill("broken", valid=False)])

    assert "alpha" in section
    assert "broken" not in section


def test_render_skills_section_empty_without_valid_skills() -> None:
    assert render_skills_section([]) == ""
    assert render_skills_section([_skill("broken", valid=False)]) == ""


def test_render_skills_section_truncates_and_escapes() -> None:
    section = render_skills_section([_skill("alpha", "a | b " + "x" * 100)], skills_dir_label="skills/")

    row = next(line for line in section.splitlines() if line.startswith("| alpha"))
    assert "a \\| b" in row
    assert row.endswith("... |")
    assert "Read `skills/<skill-name>/SKILL.md`" in section


def test_update_skills_section_replaces_marker_region(tmp_path: Path) -> None:
    target = tmp_path / "CLAUDE.md"
    target.write_text(
        f"# Project\n\n{SKILLS_START_MARKER}\nstale content\n{SKILLS_END_MARKER}\n\n## Footer\n",
        encoding="utf-8",
    )

    changed = update_skills_section(target, [_skill("alpha")])

    content = target.read_text(encoding="utf-8")
    assert changed is True
    assert content.startswith(f"# Project\n\n{SKILLS_START_MARKER}\n## Available Skills\n")
    assert "stale content" not in content
    assert f"SKILL.md`\n{SKILLS_END_MARKER}\n\n## Footer\n" in content


def test_update_skills_section_is_idempotent(tmp_path: Path) -> None:
    target = tmp_path / "CLAUDE.md"
    target.write_text(f"{SKILLS_START_MARKER}\n{SKILLS_END_MARKER}\n", encoding="utf-8")

    assert update_skills_section(target, [_skill("alpha")]) is True
    assert update_skills_section(target, [_skill("alpha")]) is False


def test_update_skills_section_without_markers(tmp_path: Path) -> None:
    target = tmp_path / "CLAUDE.md"
    target.write_text("# Project\n", encoding="utf-8")

    assert update_skills_section(target, [_skill("alpha")]) is False
    assert target.read_text(encoding="utf-8") == "# Project\n"


def test_has_skills_markers_requires_order() -> None:
    assert has_skills_markers(f"{SKILLS_START_MARKER}\n{SKILLS_END_MARKER}")
    assert not has_skills_markers(f"{SKILLS_END_MARKER}\n{SKILLS_START_MARKER}")
    assert not has_skills_markers(SKILLS_START_MARKER)
