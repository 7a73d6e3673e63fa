"""SKILL.md template rendered for new skills."""

from __future__ import annotations

import yaml

from samuel.constants.skill import DEFAULT_AUTHOR, DEFAULT_LICENSE, DEFAULT_VERSION
from samuel.utils import to_title_case

SKILL_TEMPLATE: str = """\
---
name: {name}
description: |
  Brief description of what this skill does and when to use it.
  Include specific triggers and keywords that should activate this skill.
license: {license}
metadata:
  author: {author}
  version: {version}
---

# {title}

## Purpose

Describe what capability this skill provides to AI agents.

## When to Use

- Scenario 1: When the user asks for...
- Scenario 2: When working with...

## Instructions

Step-by-step instructions for the AI agent:

1. First, analyze the request
2. Then, perform the action
3. Finally, verify the result

## Examples

### Example 1: Basic Usage

**Input**: User request example

**Output**:
```
Expected output
```

## Notes

Any additional context, warnings, or best practices.
"""


def render_skill_template(
    name: str,
    *,
    author: str = DEFAULT_AUTHOR,
    license: str = DEFAULT_LICENSE,
    version: str = DEFAULT_VERSION,
) -> str:
    """Render the starter SKILL.md for ``name``.

    Free-text values are emitted as double-quoted YAML scalars so characters
    such as ``@``, ``#`` or ``: `` survive a round trip through the parser.
    """
    return SKILL_TEMPLATE.format(
        name=name,
        title=to_title_case(name),
        author=_quoted_scalar(author),
        license=_quoted_scalar(license),
        version=_quoted_scalar(version),
    )


def _quoted_scalar(value: str) -> str:
    return yaml.safe_dump(value, default_style='"', allow_unicode=True, width=float("inf")).strip()
