"""Samuel: scaffolding and validation for Agent Skills."""

from __future__ import annotations

__version__ = "0.4.0"
