"""Human-readable terminal reporters for skill commands."""

from __future__ import annotations

from samuel.constants.reporting import (
    ANSI_BOLD,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_YELLOW,
    ERROR_SYMBOL,
    LIST_DESCRIPTION_MAX_LENGTH,
    SUCCESS_SYMBOL,
    WARN_SYMBOL,
)
from samuel.model import Finding, SkillInfo
from samuel.reporting.formatting import color_severity, colorize, one_line, truncate


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


class ValidationReporter:
    """Formats validation reports, one line per finding."""

    def __init__(self, skills: list[SkillInfo], *, color: bool = False) -> None:
        self._skills = skills
        self._color = color

    def render(self) -> str:
        """Render findings for every skill plus a closing summary."""
        lines: list[str] = []
        # Findings sit flush left for a single skill and nest under each header otherwise.
        indent = "  " if len(self._skills) > 1 else ""
        for skill in self._skills:
            lines.append(self._render_status(skill))
            lines.extend(f"{indent}{self._render_finding(finding)}" for finding in skill.report)

        if len(self._skills) > 1:
            lines.append("")
            lines.append(self._render_summary())
        return "\n".join(lines)

    def _render_status(self, skill: SkillInfo) -> str:
        report = skill.report
        if skill.valid:
            status = f"{SUCCESS_SYMBOL} {skill.dir_name}: valid"
            if report.warnings:
                status = f"{status} ({_plural(len(report.warnings), 'warning')})"
            return colorize(status, ANSI_GREEN, enabled=self._color)
        status = (
            f"{ERROR_SYMBOL} {skill.dir_name}: invalid "
            f"({_plural(len(report.errors), 'error')}, {_plural(len(report.warnings), 'warning')})"
        )
        return colorize(status, ANSI_RED, enabled=self._color)

    def _render_finding(self, finding: Finding) -> str:
        severity = color_severity(finding.severity, enabled=self._color)
        return f"{severity}: {finding.field}: {finding.message}"

    def _render_summary(self) -> str:
        total = len(self._skills)
        invalid = sum(1 for skill in self._skills if not skill.valid)
        if invalid:
            return colorize(
                f"{WARN_SYMBOL} Validated {total} skills: {total - invalid} valid, {invalid} invalid",
                ANSI_YELLOW,
                enabled=self._color,
            )
        return colorize(f"{SUCCESS_SYMBOL} All {total} skills are valid", ANSI_GREEN, enabled=self._color)


class SkillListReporter:
    """Formats the ``skill list`` table of installed skills."""

    def __init__(self, skills: list[SkillInfo], *, color: bool = False) -> None:
        self._skills = skills
        self._color = color

    def render(self) -> str:
        lines = [colorize("Installed Skills", ANSI_BOLD, enabled=self._color), ""]
        for skill in self._skills:
            description = truncate(one_line(skill.metadata.description), LIST_DESCRIPTION_MAX_LENGTH)
            if skill.valid:
                lines.append(colorize(f"{SUCCESS_SYMBOL} {skill.metadata.name}", ANSI_GREEN, enabled=self._color))
            else:
                lines.append(colorize(f"{ERROR_SYMBOL} {skill.dir_name} (invalid)", ANSI_RED, enabled=self._color))
            if description:
                lines.append(colorize(f"     {description}", ANSI_DIM, enabled=self._color))
        lines.append("")
        lines.append(f"Total: {len(self._skills)} skill(s)")
        return "\n".join(lines)


class SkillInfoReporter:
    """Formats the detailed ``skill info`` view."""

    def __init__(self, info: SkillInfo, *, color: bool = False, body_line_limit: int) -> None:
        self._info = info
        self._color = color
        self._body_line_limit = body_line_limit

    def render(self) -> str:
        sections = [
            colorize(f"Skill: {self._info.dir_name}", ANSI_BOLD, enabled=self._color),
            self._render_metadata(),
            self._render_structure(),
            self._render_validation(),
        ]
        return "\n\n".join(sections)

    def _section(self, title: str) -> str:
        return colorize(title, ANSI_BOLD, enabled=self._color)

    def _render_metadata(self) -> str:
        meta = self._info.metadata
        lines = [self._section("Metadata"), f"  Name:          {meta.name}"]

        description = meta.description.strip()
        if "\n" in description:
            lines.append("  Description:")
            lines.extend(f"    {line.strip()}" for line in description.splitlines())
        else:
            lines.append(f"  Description:   {description}")

        if meta.license:
            lines.append(f"  License:       {meta.license}")
        if meta.compatibility:
            lines.append(f"  Compatibility: {meta.compatibility}")
        if meta.allowed_tools:
            lines.append(f"  Allowed tools: {meta.allowed_tools}")
        if meta.metadata:
            lines.append("  Custom metadata:")
            lines.extend(f"    {key}: {value}" for key, value in sorted(meta.metadata.items()))
        return "\n".join(lines)

    def _render_structure(self) -> str:
        info = self._info
        lines = [self._section("Structure"), f"  Path:          {info.path}"]
        if info.subdirectories:
            lines.append(f"  Directories:   {', '.join(info.subdirectories)}")
        if info.body:
            lines.append(f"  Body lines:    {info.body_line_count}")
            if info.body_line_count > self._body_line_limit:
                lines.append(
                    colorize(
                        f"    {WARN_SYMBOL} Consider splitting content >{self._body_line_limit} lines",
                        ANSI_YELLOW,
                        enabled=self._color,
                    )
                )
        return "\n".join(lines)

    def _render_validation(self) -> str:
        lines = [self._section("Validation")]
        errors = self._info.report.errors
        if not errors:
            lines.append(colorize(f"  {SUCCESS_SYMBOL} Valid", ANSI_GREEN, enabled=self._color))
        else:
            lines.append(colorize(f"  {ERROR_SYMBOL} Invalid", ANSI_RED, enabled=self._color))
        for finding in self._info.report:
            severity = color_severity(finding.severity, enabled=self._color)
            lines.append(f"    {severity}: {finding.field}: {finding.message}")
        return "\n".join(lines)
