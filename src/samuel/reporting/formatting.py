"""Small text helpers shared by the terminal and Markdown renderers."""

from __future__ import annotations

from samuel.constants.reporting import ANSI_RESET, SEVERITY_COLORS, TRUNCATION_SUFFIX
from samuel.types import Severity


def colorize(text: str, color: str, *, enabled: bool = True) -> str:
    if not enabled or not color:
        return text
    return f"{color}{text}{ANSI_RESET}"


def color_severity(severity: Severity, *, enabled: bool = True) -> str:
    return colorize(severity, SEVERITY_COLORS.get(severity, ""), enabled=enabled)


def one_line(text: str) -> str:
    """Collapse all whitespace runs, including newlines, to single spaces."""
    return " ".join(text.split())


def truncate(text: str, limit: int) -> str:
    """Shorten ``text`` to at most ``limit`` characters, marking the cut with ``...``."""
    if len(text) <= limit:
        return text
    return text[: limit - len(TRUNCATION_SUFFIX)] + TRUNCATION_SUFFIX
