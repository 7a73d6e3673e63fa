"""Skill directory scaffolding."""

from .creator import create_skill_scaffold
from .template import render_skill_template

__all__ = ["create_skill_scaffold", "render_skill_template"]
