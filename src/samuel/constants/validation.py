"""Stable codes for skill findings and config validation issues."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG007: str = "CFG007"  # value out of range

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"skills_dir", "instructions_file", "body_line_limit"})
STRING_CONFIG_KEYS: tuple[str, ...] = ("skills_dir", "instructions_file")

# Codes for findings that are not backed by an exception type.
METADATA_NOT_MAPPING: str = "MetadataNotMapping"
BODY_TOO_LONG: str = "BodyTooLong"
BODY_EMPTY: str = "BodyEmpty"

FIELD_FRONTMATTER: str = "frontmatter"
FIELD_BODY: str = "body"
FIELD_METADATA: str = "metadata"
