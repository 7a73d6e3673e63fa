"""Constants for report rendering and the skills index section."""

from __future__ import annotations

SCHEMA_VERSION: str = "1.0.0"
VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

LIST_DESCRIPTION_MAX_LENGTH: int = 60
INDEX_DESCRIPTION_MAX_LENGTH: int = 80
TRUNCATION_SUFFIX: str = "..."

SKILLS_START_MARKER: str = "<!-- SKILLS_START -->"
SKILLS_END_MARKER: str = "<!-- SKILLS_END -->"
SKILLS_SECTION_TITLE: str = "## Available Skills"
SKILLS_SECTION_INTRO: str = "Skills extend AI capabilities. Load a skill when task matches its description."
INDEX_TEMP_PREFIX: str = ".tmp-"
INDEX_TEMP_SUFFIX: str = ".md"

SUCCESS_SYMBOL: str = "✓"
ERROR_SYMBOL: str = "✗"
WARN_SYMBOL: str = "⚠"

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_RED: str = "\033[31;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"
ANSI_DIM: str = "\033[2m"

SEVERITY_COLORS: dict[str, str] = {
    "error": ANSI_RED,
    "warning": ANSI_YELLOW,
}
