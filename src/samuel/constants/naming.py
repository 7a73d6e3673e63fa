"""Constants for skill name validation."""

from __future__ import annotations

import re
from re import Pattern

MAX_SKILL_NAME_LENGTH: int = 64

SKILL_NAME_ALLOWED_CHARS: Pattern[str] = re.compile(r"[a-z0-9-]+", re.ASCII)
SKILL_NAME_DISALLOWED_CHAR: Pattern[str] = re.compile(r"[^a-z0-9-]", re.ASCII)
CONSECUTIVE_HYPHENS: str = "--"

NAME_RULE_REQUIRED: str = "required"
NAME_RULE_LENGTH: str = "length"
NAME_RULE_CHARSET: str = "charset"
NAME_RULE_EDGE_HYPHEN: str = "edge-hyphen"
NAME_RULE_CONSECUTIVE_HYPHENS: str = "consecutive-hyphens"
