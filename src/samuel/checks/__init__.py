"""Field-level checks applied to parsed skill documents."""

from .frontmatter import validate_frontmatter

__all__ = ["validate_frontmatter"]
