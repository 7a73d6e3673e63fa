"""Tests for project config loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from samuel.config import SamuelConfig, load_config, suggest_key, validate_config_file
from samuel.constants.validation import ALLOWED_CONFIG_KEYS, CFG001, CFG002, CFG003, CFG004, CFG005, CFG007
from samuel.exceptions import ConfigError
from samuel.exceptions.validation import ConfigIssue, format_issues, sort_issues


def test_load_config_defaults_without_file(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert config == SamuelConfig()
    assert config.skills_path(tmp_path) == (tmp_path / ".claude" / "skills").resolve()
    assert config.instructions_path(tmp_path) == (tmp_path / "CLAUDE.md").resolve()
    assert config.body_line_limit == 500


def test_load_config_reads_samuel_yaml(tmp_path: Path) -> None:
    (tmp_path / "samuel.yaml").write_text(
        "skills_dir: agent/skills\ninstructions_file: AGENTS.md\nbody_line_limit: 300\n",
        encoding="utf-8",
    )

    config = load_config(tmp_path)

    assert config.skills_dir == "agent/skills"
    assert config.instructions_file == "AGENTS.md"
    assert config.body_line_limit == 300


def test_load_config_falls_back_to_hidden_file(tmp_path: Path) -> None:
    (tmp_path / ".samuel.yaml").write_text("skills_dir: hidden/skills\n", encoding="utf-8")

    assert load_config(tmp_path).skills_dir == "hidden/skills"


def test_load_config_prefers_primary_file(tmp_path: Path) -> None:
    (tmp_path / "samuel.yaml").write_text("skills_dir: primary\n", encoding="utf-8")
    (tmp_path / ".samuel.yaml").write_text("skills_dir: hidden\n", encoding="utf-8")

    assert load_config(tmp_path).skills_dir == "primary"


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "samuel.yaml").write_text("", encoding="utf-8")

    assert load_config(tmp_path) == SamuelConfig()


def test_load_config_explicit_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path, tmp_path / "missing.yaml")


def test_load_config_explicit_directory(tmp_path: Path) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()

    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path, config_dir)


def test_load_config_non_utf8_file(tmp_path: Path) -> None:
    (tmp_path / "samuel.yaml").write_bytes(b"skills_dir: caf\xe9\n")

    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    ("content", "message"),
    [
        pytest.param("skills_dir: [unclosed\n", "Invalid YAML", id="bad-yaml"),
        pytest.param("- a\n- b\n", "must be a YAML mapping", id="not-mapping"),
        pytest.param("skills_dir: 3\n", "skills_dir must be a non-empty string", id="skills-dir-type"),
        pytest.param("instructions_file: ''\n", "instructions_file must be a non-empty string", id="empty-string"),
        pytest.param("body_line_limit: 0\n", "body_line_limit must be a positive integer", id="zero-limit"),
        pytest.param("body_line_limit: true\n", "body_line_limit must be a positive integer", id="bool-limit"),
    ],
)
def test_load_config_rejects_invalid_values(tmp_path: Path, content: str, message: str) -> None:
    (tmp_path / "samuel.yaml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(tmp_path)


def test_validate_config_file_without_config(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_validate_config_file_explicit_missing(tmp_path: Path) -> None:
    issues = validate_config_file(tmp_path, tmp_path / "missing.yaml")

    assert [issue.code for issue in issues] == [CFG001]


def test_validate_config_file_bad_yaml_and_shape(tmp_path: Path) -> None:
    bad_yaml = tmp_path / "bad.yaml"
    bad_yaml.write_text("skills_dir: [oops\n", encoding="utf-8")
    not_mapping = tmp_path / "list.yaml"
    not_mapping.write_text("- 1\n", encoding="utf-8")

    assert [issue.code for issue in validate_config_file(tmp_path, bad_yaml)] == [CFG002]
    assert [issue.code for issue in validate_config_file(tmp_path, not_mapping)] == [CFG003]


def test_validate_config_file_unreadable(tmp_path: Path) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    (tmp_path / "samuel.yaml").write_bytes(b"skills_dir: caf\xe9\n")

    directory_issues = validate_config_file(tmp_path, config_dir)
    encoding_issues = validate_config_file(tmp_path)

    assert [issue.code for issue in directory_issues] == [CFG002]
    assert [issue.code for issue in encoding_issues] == [CFG002]
    assert "cannot read config file" in encoding_issues[0].message


def test_validate_config_file_collects_all_issues(tmp_path: Path) -> None:
    (tmp_path / "samuel.yaml").write_text(
        "skill_dir: typo\ninstructions_file: 7\nbody_line_limit: -1\n",
        encoding="utf-8",
    )

    issues = sort_issues(validate_config_file(tmp_path))

    assert [(issue.code, issue.field) for issue in issues] == [
        (CFG004, "skill_dir"),
        (CFG005, "instructions_file"),
        (CFG007, "body_line_limit"),
    ]
    assert issues[0].hint == "did you mean `skills_dir`?"


def test_validate_config_file_accepts_valid_file(tmp_path: Path) -> None:
    (tmp_path / "samuel.yaml").write_text("skills_dir: skills\nbody_line_limit: 200\n", encoding="utf-8")

    assert validate_config_file(tmp_path) == []


def test_suggest_key_without_match() -> None:
    assert suggest_key("zzzzzz", ALLOWED_CONFIG_KEYS) == ""


def test_format_issues_single_line_per_issue() -> None:
    issues = [
        ConfigIssue(code=CFG005, path="samuel.yaml", field="b", message="second"),
        ConfigIssue(code=CFG004, path="samuel.yaml", field="a", message="first", hint="did you mean `x`?"),
    ]

    assert format_issues(issues) == (
        "[CFG004] samuel.yaml first (did you mean `x`?)\n[CFG005] samuel.yaml second"
    )
