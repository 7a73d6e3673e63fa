"""JSON payload for ``skill validate --output-format json``."""

from __future__ import annotations

from samuel.constants.reporting import SCHEMA_VERSION
from samuel.model import SkillInfo
from samuel.types import JsonObject, JsonValue


def build_validation_payload(skills: list[SkillInfo]) -> JsonObject:
    """Serialize validation results; shape is described by ``schemas/validation-report.schema.json``."""
    entries: list[JsonValue] = [
        {
            "skill": skill.dir_name,
            "path": str(skill.path),
            "valid": skill.valid,
            "findings": [finding.to_dict() for finding in skill.report],
        }
        for skill in skills
    ]
    valid = sum(1 for skill in skills if skill.valid)
    return {
        "schema_version": SCHEMA_VERSION,
        "skills": entries,
        "summary": {
            "total": len(skills),
            "valid": valid,
            "invalid": len(skills) - valid,
        },
    }


def build_error_payload(error: Exception) -> JsonObject:
    """Serialize a command-level failure for JSON consumers."""
    return {
        "schema_version": SCHEMA_VERSION,
        "error": {"code": type(error).__name__, "message": str(error)},
    }
