"""Reporting package for Samuel outputs."""

from .index import has_skills_markers, render_skills_section, update_skills_section
from .json_report import build_error_payload, build_validation_payload
from .stdout import SkillInfoReporter, SkillListReporter, ValidationReporter

__all__ = [
    "SkillInfoReporter",
    "SkillListReporter",
    "ValidationReporter",
    "build_error_payload",
    "build_validation_payload",
    "has_skills_markers",
    "render_skills_section",
    "update_skills_section",
]
