"""Config file validation for Samuel."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from samuel.config.loader import find_config_path
from samuel.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG007,
    STRING_CONFIG_KEYS,
)
from samuel.exceptions.validation import ConfigIssue


def validate_config_file(root: Path, config_path: Path | None = None) -> list[ConfigIssue]:
    """Validate a samuel.yaml file and return every issue found.

    This is the collect-all counterpart of :func:`samuel.config.load_config`
    used by ``samuel validate-config``. It never raises.
    """
    issues: list[ConfigIssue] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else find_config_path(root)
    if path is None:
        return issues
    path_str = str(path)

    if not path.exists():
        issues.append(ConfigIssue(code=CFG001, path=path_str, field="", message=f"config file not found: {path}"))
        return issues

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        issues.append(ConfigIssue(code=CFG002, path=path_str, field="", message=f"cannot read config file: {exc}"))
        return issues
    except yaml.YAMLError as exc:
        issues.append(ConfigIssue(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return issues

    if raw is None:
        return issues

    if not isinstance(raw, dict):
        issues.append(
            ConfigIssue(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return issues

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            issues.append(
                ConfigIssue(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    for key in STRING_CONFIG_KEYS:
        if key in raw and (not isinstance(raw[key], str) or not raw[key].strip()):
            issues.append(
                ConfigIssue(
                    code=CFG005,
                    path=path_str,
                    field=key,
                    message=f"invalid type for `{key}`",
                    hint="expected a non-empty string",
                )
            )

    if "body_line_limit" in raw:
        val = raw["body_line_limit"]
        if isinstance(val, bool) or not isinstance(val, int):
            issues.append(
                ConfigIssue(
                    code=CFG005,
                    path=path_str,
                    field="body_line_limit",
                    message="invalid type for `body_line_limit`",
                    hint="expected a positive integer",
                )
            )
        elif val <= 0:
            issues.append(
                ConfigIssue(
                    code=CFG007,
                    path=path_str,
                    field="body_line_limit",
                    message=f"`body_line_limit` must be a positive integer, got {val}",
                )
            )

    return issues


def suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a "did you mean" hint for a misspelled key, or an empty string."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
