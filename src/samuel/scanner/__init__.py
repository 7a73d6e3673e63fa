"""Skill discovery within a skills directory."""

from .discovery import discover_skill_dirs, load_all_skills, resolve_skill_dir

__all__ = ["discover_skill_dirs", "load_all_skills", "resolve_skill_dir"]
