"""Parser for SKILL.md files with YAML frontmatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from samuel.constants.parsing import (
    BYTE_ORDER_MARK,
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
)
from samuel.exceptions import MalformedFrontmatterError
from samuel.model import ParsedSkillDocument


def parse_skill_markdown_file(path: Path) -> ParsedSkillDocument:
    """Read and parse a SKILL.md file from disk."""
    return parse_skill_markdown(path.read_text(encoding="utf-8"), path=path)


def parse_skill_markdown(raw_text: str, *, path: Path | None = None) -> ParsedSkillDocument:
    """Split SKILL.md text into a frontmatter mapping and a Markdown body.

    Raises :class:`MalformedFrontmatterError` when the leading ``---`` block
    is missing, unterminated, not valid YAML, or not a mapping. An empty
    block yields an empty mapping.
    """
    lines = raw_text.lstrip(BYTE_ORDER_MARK).splitlines()

    if not lines or lines[0].strip() != FRONTMATTER_DELIMITER:
        raise MalformedFrontmatterError("SKILL.md must start with a YAML frontmatter block (---)")

    frontmatter_end = _find_frontmatter_end(lines)
    if frontmatter_end is None:
        raise MalformedFrontmatterError("frontmatter block is not closed (missing ---)")

    frontmatter_text = "\n".join(lines[1:frontmatter_end])
    try:
        payload = yaml.safe_load(frontmatter_text) if frontmatter_text.strip() else None
    except yaml.YAMLError as exc:
        raise MalformedFrontmatterError(f"invalid YAML frontmatter: {_single_line(str(exc))}") from exc

    frontmatter: dict[str, Any]
    if payload is None:
        frontmatter = {}
    elif isinstance(payload, dict):
        frontmatter = payload
    else:
        raise MalformedFrontmatterError(f"frontmatter must be a YAML mapping, got {type(payload).__name__}")

    return ParsedSkillDocument(
        file_path=path,
        raw_text=raw_text,
        frontmatter=frontmatter,
        body="\n".join(lines[frontmatter_end + 1 :]).strip(),
    )


def _find_frontmatter_end(lines: list[str]) -> int | None:
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None


def _single_line(message: str) -> str:
    return " ".join(message.split())
