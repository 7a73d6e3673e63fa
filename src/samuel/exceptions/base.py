"""Root exception type for Samuel."""

from __future__ import annotations


class SamuelError(Exception):
    """Base class for all errors raised by Samuel."""
