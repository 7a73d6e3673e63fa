"""Structured issue model for config file validation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigIssue:
    """A single config validation issue with stable code and location context."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        parts = [f"[{self.code}]", self.path, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(parts)


def sort_issues(issues: list[ConfigIssue]) -> list[ConfigIssue]:
    """Sort config issues deterministically by code, path, field."""
    return sorted(issues, key=lambda e: (e.code, e.path, e.field))


def format_issues(issues: list[ConfigIssue]) -> str:
    """Format a list of config issues as a multi-line string."""
    return "\n".join(e.format() for e in sort_issues(issues))
