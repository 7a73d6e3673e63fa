"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "samuel"
CLI_DESCRIPTION: str = "Scaffold and validate Agent Skills (SKILL.md directories)."
