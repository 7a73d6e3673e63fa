"""Frontmatter field checks for SKILL.md documents.

Each ``_check_*`` function inspects the raw frontmatter mapping and raises a
:class:`SkillFieldError` subclass on failure. :func:`validate_frontmatter`
runs all of them and collects the failures into a report, so one bad field
never hides another.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from samuel.constants.skill import (
    DEFAULT_BODY_LINE_LIMIT,
    MAX_COMPATIBILITY_LENGTH,
    MAX_DESCRIPTION_LENGTH,
)
from samuel.constants.validation import (
    BODY_EMPTY,
    BODY_TOO_LONG,
    FIELD_BODY,
    FIELD_METADATA,
    METADATA_NOT_MAPPING,
)
from samuel.exceptions import (
    FieldTooLongError,
    MissingFieldError,
    NameMismatchError,
    SkillFieldError,
)
from samuel.model import ParsedSkillDocument, ValidationReport

FieldCheck: TypeAlias = Callable[[Mapping[str, Any], str], None]


def validate_frontmatter(
    document: ParsedSkillDocument,
    dir_name: str,
    *,
    body_line_limit: int = DEFAULT_BODY_LINE_LIMIT,
) -> ValidationReport:
    """Check a parsed SKILL.md against the field rules and return the findings."""
    report = ValidationReport()
    frontmatter = document.frontmatter

    for check in FIELD_CHECKS:
        try:
            check(frontmatter, dir_name)
        except SkillFieldError as exc:
            report.record(exc)

    if "metadata" in frontmatter and not isinstance(frontmatter["metadata"], Mapping):
        report.warn(
            code=METADATA_NOT_MAPPING,
            field=FIELD_METADATA,
            message=f"metadata should be a mapping, got {type(frontmatter['metadata']).__name__}",
        )

    body_lines = len(document.body.splitlines())
    if body_lines == 0:
        report.warn(code=BODY_EMPTY, field=FIELD_BODY, message="body is empty")
    elif body_lines > body_line_limit:
        report.warn(
            code=BODY_TOO_LONG,
            field=FIELD_BODY,
            message=(
                f"body has {body_lines} lines (limit {body_line_limit}); "
                "consider moving detail into references/"
            ),
        )

    return report


def _check_name(frontmatter: Mapping[str, Any], dir_name: str) -> None:
    declared = frontmatter.get("name")
    if not isinstance(declared, str) or not declared.strip():
        raise NameMismatchError(
            f"name is missing; it must match directory name '{dir_name}'",
            declared=declared,
            expected=dir_name,
        )
    if declared != dir_name:
        raise NameMismatchError(
            f"skill name '{declared}' must match directory name '{dir_name}'",
            declared=declared,
            expected=dir_name,
        )


def _check_description(frontmatter: Mapping[str, Any], dir_name: str) -> None:
    description = frontmatter.get("description")
    if description is None:
        raise MissingFieldError("description is required", field="description")
    if not isinstance(description, str):
        raise MissingFieldError(
            f"description must be a string, got {type(description).__name__}",
            field="description",
        )
    if not description.strip():
        raise MissingFieldError("description is required", field="description")


def _check_description_length(frontmatter: Mapping[str, Any], dir_name: str) -> None:
    description = frontmatter.get("description")
    if isinstance(description, str):
        _check_length("description", description, MAX_DESCRIPTION_LENGTH)


def _check_compatibility_length(frontmatter: Mapping[str, Any], dir_name: str) -> None:
    compatibility = frontmatter.get("compatibility")
    if isinstance(compatibility, str):
        _check_length("compatibility", compatibility, MAX_COMPATIBILITY_LENGTH)


def _check_length(field: str, value: str, limit: int) -> None:
    if len(value) > limit:
        raise FieldTooLongError(
            f"{field} exceeds {limit} character limit ({len(value)} chars)",
            field=field,
            length=len(value),
            limit=limit,
        )


FIELD_CHECKS: tuple[FieldCheck, ...] = (
    _check_name,
    _check_description,
    _check_description_length,
    _check_compatibility_length,
)
