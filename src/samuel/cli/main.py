"""CLI entrypoint for Samuel."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from samuel import __version__
from samuel.cli.handlers import (
    handle_create,
    handle_info,
    handle_list,
    handle_sync,
    handle_validate,
    handle_validate_config,
)
from samuel.config import load_config
from samuel.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from samuel.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from samuel.exceptions import ConfigError, SamuelError, SkillFieldError

logger = logging.getLogger(__name__)

SKILL_HANDLERS = {
    "create": handle_create,
    "validate": handle_validate,
    "list": handle_list,
    "info": handle_info,
    "sync": handle_sync,
}


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path (default: .)")
    common.add_argument("-c", "--config", type=Path, default=None, help="Explicit config file")
    common.add_argument(
        "-s",
        "--skills-dir",
        type=Path,
        default=None,
        help="Skills directory (overrides skills_dir from config)",
    )
    common.add_argument("--no-color", action="store_true", help="Disable colored output")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    skill = subparsers.add_parser("skill", help="Manage Agent Skills")
    skill_commands = skill.add_subparsers(dest="skill_command", required=True)

    create = skill_commands.add_parser("create", parents=[common], help="Create a new skill scaffold")
    create.add_argument("name", help="Skill name (lowercase letters, digits and single hyphens, max 64 chars)")
    create.add_argument("--author", default=None, help="Author written to metadata.author")

    validate = skill_commands.add_parser(
        "validate",
        parents=[common],
        help="Validate one skill, or every skill when no name is given",
    )
    validate.add_argument("name", nargs="?", default=None, help="Skill name")
    validate.add_argument(
        "--output-format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Report format: text (default) or json",
    )

    skill_commands.add_parser("list", parents=[common], help="List installed skills")

    info = skill_commands.add_parser("info", parents=[common], help="Show detailed information about a skill")
    info.add_argument("name", help="Skill name")

    sync = skill_commands.add_parser(
        "sync",
        parents=[common],
        help="Regenerate the Available Skills table in the instruction file",
    )
    sync.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help="Instruction file to update (overrides instructions_file from config)",
    )

    subparsers.add_parser("validate-config", parents=[common], help="Validate samuel.yaml without running")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    if args.command == "validate-config":
        return handle_validate_config(args)

    if args.command != "skill":
        parser.error(f"Unsupported command: {args.command}")

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    handler = SKILL_HANDLERS[args.skill_command]
    try:
        return handler(args, config)
    except SkillFieldError as exc:
        print(f"error: {exc.field}: {exc}", file=sys.stderr)
        return 1
    except SamuelError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        logger.debug("Filesystem error", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
