"""Dataclasses shared by the parser, validators and reporters."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from samuel.exceptions import SkillFieldError
from samuel.types import JsonObject, Severity

KNOWN_FRONTMATTER_KEYS: frozenset[str] = frozenset(
    {"name", "description", "license", "compatibility", "allowed-tools", "metadata"}
)


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return ""


@dataclass(frozen=True)
class Finding:
    """One validation finding, rendered as ``<severity>: <field>: <message>``."""

    code: str
    field: str
    severity: Severity
    message: str

    @classmethod
    def from_error(cls, error: SkillFieldError, severity: Severity = "error") -> Finding:
        """Build a finding from a field-level skill error."""
        return cls(
            code=type(error).__name__,
            field=error.field,
            severity=severity,
            message=error.message,
        )

    def format(self) -> str:
        """Format as a single report line."""
        return f"{self.severity}: {self.field}: {self.message}"

    def to_dict(self) -> JsonObject:
        """Serialize finding to a JSON-compatible dict."""
        return {
            "code": self.code,
            "field": self.field,
            "severity": self.severity,
            "message": self.message,
        }


@dataclass
class ValidationReport:
    """Ordered findings produced by a single validation run."""

    findings: list[Finding] = field(default_factory=list)

    def record(self, error: SkillFieldError, severity: Severity = "error") -> None:
        """Append a finding converted from ``error``."""
        self.findings.append(Finding.from_error(error, severity))

    def warn(self, *, code: str, field: str, message: str) -> None:
        self.findings.append(Finding(code=code, field=field, severity="warning", message=message))

    def extend(self, other: ValidationReport) -> None:
        self.findings.extend(other.findings)

    @property
    def errors(self) -> list[Finding]:
        return [finding for finding in self.findings if finding.severity == "error"]

    @property
    def warnings(self) -> list[Finding]:
        return [finding for finding in self.findings if finding.severity == "warning"]

    @property
    def has_errors(self) -> bool:
        return any(finding.severity == "error" for finding in self.findings)

    @property
    def exit_code(self) -> int:
        """Return 1 when any error-severity finding exists, 0 otherwise."""
        return 1 if self.has_errors else 0

    def __iter__(self) -> Iterator[Finding]:
        return iter(self.findings)

    def __len__(self) -> int:
        return len(self.findings)


@dataclass(frozen=True)
class SkillMetadata:
    """Typed view of SKILL.md frontmatter.

    Values of the wrong type collapse to empty defaults here; the frontmatter
    validator reports them against the raw mapping.
    """

    name: str = ""
    description: str = ""
    license: str = ""
    compatibility: str = ""
    allowed_tools: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_frontmatter(cls, frontmatter: Mapping[str, Any]) -> SkillMetadata:
        raw_metadata = frontmatter.get("metadata")
        metadata: dict[str, str] = {}
        if isinstance(raw_metadata, Mapping):
            metadata = {str(key): str(value) for key, value in raw_metadata.items()}
        return cls(
            name=_as_text(frontmatter.get("name")),
            description=_as_text(frontmatter.get("description")),
            license=_as_text(frontmatter.get("license")),
            compatibility=_as_text(frontmatter.get("compatibility")),
            allowed_tools=_as_text(frontmatter.get("allowed-tools")),
            metadata=metadata,
            extra={str(k): v for k, v in frontmatter.items() if k not in KNOWN_FRONTMATTER_KEYS},
        )


@dataclass(frozen=True)
class ParsedSkillDocument:
    """Parsed SKILL.md: raw text, frontmatter mapping and Markdown body."""

    file_path: Path | None
    raw_text: str
    frontmatter: dict[str, Any]
    body: str

    @property
    def metadata(self) -> SkillMetadata:
        return SkillMetadata.from_frontmatter(self.frontmatter)


@dataclass
class SkillInfo:
    """A skill directory together with its parsed content and validation report."""

    path: Path
    dir_name: str
    metadata: SkillMetadata = field(default_factory=SkillMetadata)
    body: str = ""
    has_scripts: bool = False
    has_references: bool = False
    has_assets: bool = False
    report: ValidationReport = field(default_factory=ValidationReport)

    @property
    def valid(self) -> bool:
        return not self.report.has_errors

    @property
    def body_line_count(self) -> int:
        return len(self.body.splitlines())

    @property
    def subdirectories(self) -> tuple[str, ...]:
        """Names of optional subdirectories present, with trailing slashes."""
        present = (
            ("scripts/", self.has_scripts),
            ("references/", self.has_references),
            ("assets/", self.has_assets),
        )
        return tuple(name for name, exists in present if exists)
