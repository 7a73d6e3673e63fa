"""Skill name rules and string helpers for skill names."""

from __future__ import annotations

from samuel.constants.naming import (
    CONSECUTIVE_HYPHENS,
    MAX_SKILL_NAME_LENGTH,
    NAME_RULE_CHARSET,
    NAME_RULE_CONSECUTIVE_HYPHENS,
    NAME_RULE_EDGE_HYPHEN,
    NAME_RULE_LENGTH,
    NAME_RULE_REQUIRED,
    SKILL_NAME_ALLOWED_CHARS,
    SKILL_NAME_DISALLOWED_CHAR,
)
from samuel.exceptions import InvalidNameError


def check_skill_name(name: str) -> None:
    """Raise :class:`InvalidNameError` if ``name`` is not a valid skill name.

    Rules are checked in a fixed order and the first violation wins, so a
    given input always yields the same message.
    """
    if not name:
        raise InvalidNameError("name is required", name=name, rule=NAME_RULE_REQUIRED)

    if len(name) > MAX_SKILL_NAME_LENGTH:
        raise InvalidNameError(
            f"name exceeds {MAX_SKILL_NAME_LENGTH} character limit ({len(name)} chars)",
            name=name,
            rule=NAME_RULE_LENGTH,
        )

    if SKILL_NAME_ALLOWED_CHARS.fullmatch(name) is None:
        disallowed = _unique_in_order(SKILL_NAME_DISALLOWED_CHAR.findall(name))
        shown = ", ".join(repr(char) for char in disallowed)
        raise InvalidNameError(
            f"name contains disallowed characters {shown}; use only lowercase letters, digits, and hyphens",
            name=name,
            rule=NAME_RULE_CHARSET,
        )

    if name.startswith("-") or name.endswith("-"):
        raise InvalidNameError(
            "name cannot start or end with a hyphen",
            name=name,
            rule=NAME_RULE_EDGE_HYPHEN,
        )

    if CONSECUTIVE_HYPHENS in name:
        raise InvalidNameError(
            "name cannot contain consecutive hyphens",
            name=name,
            rule=NAME_RULE_CONSECUTIVE_HYPHENS,
        )


def to_title_case(name: str) -> str:
    """Convert a kebab-case skill name to Title Case (``pdf-tool`` -> ``Pdf Tool``)."""
    return " ".join(word[:1].upper() + word[1:] for word in name.split("-"))


def _unique_in_order(chars: list[str]) -> list[str]:
    seen: dict[str, None] = {}
    for char in chars:
        seen.setdefault(char, None)
    return list(seen)
