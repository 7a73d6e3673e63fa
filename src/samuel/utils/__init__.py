"""Utility helpers for Samuel."""

from .naming import check_skill_name, to_title_case

__all__ = ["check_skill_name", "to_title_case"]
