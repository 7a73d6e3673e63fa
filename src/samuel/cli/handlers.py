"""CLI subcommand handlers."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from samuel.config import SamuelConfig, validate_config_file
from samuel.constants.reporting import SKILLS_END_MARKER, SKILLS_START_MARKER
from samuel.constants.skill import SKILL_MARKDOWN_FILENAME, SKILL_SUBDIRECTORIES
from samuel.exceptions import SkillNotFoundError
from samuel.exceptions.validation import format_issues
from samuel.reporting import (
    SkillInfoReporter,
    SkillListReporter,
    ValidationReporter,
    build_error_payload,
    build_validation_payload,
    has_skills_markers,
    update_skills_section,
)
from samuel.scaffold import create_skill_scaffold
from samuel.scanner import load_all_skills, resolve_skill_dir
from samuel.validation import load_skill_info


def resolve_skills_dir(args: argparse.Namespace, config: SamuelConfig) -> Path:
    """Skills directory from ``--skills-dir`` or the config, relative to ``--root``."""
    root = args.root.resolve()
    if args.skills_dir is not None:
        return (root / args.skills_dir).resolve()
    return config.skills_path(root)


def use_color(args: argparse.Namespace) -> bool:
    return not args.no_color and sys.stdout.isatty()


def handle_create(args: argparse.Namespace, config: SamuelConfig) -> int:
    """Run ``samuel skill create <name>``."""
    skill_path = create_skill_scaffold(resolve_skills_dir(args, config), args.name, author=args.author)
    print(f"Created skill scaffold at {skill_path}")
    print("")
    print("  Files created:")
    print(f"    {args.name}/{SKILL_MARKDOWN_FILENAME}")
    for subdir in SKILL_SUBDIRECTORIES:
        print(f"    {args.name}/{subdir}/")
    print("")
    print(f"Edit {skill_path / SKILL_MARKDOWN_FILENAME} to define your skill")
    return 0


def handle_validate(args: argparse.Namespace, config: SamuelConfig) -> int:
    """Run ``samuel skill validate [name]`` and return 1 if any skill has errors."""
    skills_dir = resolve_skills_dir(args, config)
    if args.name is not None:
        try:
            skill_dir = resolve_skill_dir(skills_dir, args.name)
        except SkillNotFoundError as exc:
            if args.output_format != "json":
                raise
            print(json.dumps(build_error_payload(exc), indent=2, sort_keys=True))
            return 1
        skills = [load_skill_info(skill_dir, body_line_limit=config.body_line_limit)]
    else:
        skills = load_all_skills(skills_dir, body_line_limit=config.body_line_limit)

    if args.output_format == "json":
        print(json.dumps(build_validation_payload(skills), indent=2, sort_keys=True))
    elif not skills:
        print(f"No skills found in {skills_dir}")
    else:
        print(ValidationReporter(skills, color=use_color(args)).render())

    return 1 if any(not skill.valid for skill in skills) else 0


def handle_list(args: argparse.Namespace, config: SamuelConfig) -> int:
    """Run ``samuel skill list``."""
    skills_dir = resolve_skills_dir(args, config)
    skills = load_all_skills(skills_dir, body_line_limit=config.body_line_limit)
    if not skills:
        print(f"No skills found in {skills_dir}")
        print("Run 'samuel skill create <name>' to create your first skill")
        return 0

    print(SkillListReporter(skills, color=use_color(args)).render())
    return 0


def handle_info(args: argparse.Namespace, config: SamuelConfig) -> int:
    """Run ``samuel skill info <name>``; exit status follows validation."""
    skill_dir = resolve_skill_dir(resolve_skills_dir(args, config), args.name)
    info = load_skill_info(skill_dir, body_line_limit=config.body_line_limit)
    reporter = SkillInfoReporter(info, color=use_color(args), body_line_limit=config.body_line_limit)
    print(reporter.render())
    return 0 if info.valid else 1


def handle_sync(args: argparse.Namespace, config: SamuelConfig) -> int:
    """Run ``samuel skill sync`` against the configured instruction file."""
    root = args.root.resolve()
    target = (root / args.file).resolve() if args.file is not None else config.instructions_path(root)
    if not target.is_file():
        print(f"error: instruction file not found: {target}", file=sys.stderr)
        return 1

    try:
        content = target.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        print(f"error: cannot decode {target} as UTF-8: {exc}", file=sys.stderr)
        return 1

    if not has_skills_markers(content):
        print(f"No skills markers in {target}; add {SKILLS_START_MARKER} and {SKILLS_END_MARKER} to enable sync")
        return 0

    skills_dir = resolve_skills_dir(args, config)
    skills = load_all_skills(skills_dir, body_line_limit=config.body_line_limit)
    if update_skills_section(target, skills, skills_dir_label=_display_path(skills_dir, root)):
        listed = sum(1 for skill in skills if skill.valid)
        print(f"Updated skills section in {target} ({listed} skill(s))")
    else:
        print(f"Skills section in {target} is up to date")
    return 0


def handle_validate_config(args: argparse.Namespace) -> int:
    """Validate the project config and report coded issues."""
    issues = validate_config_file(args.root, args.config)
    if issues:
        print(format_issues(issues), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def _display_path(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
