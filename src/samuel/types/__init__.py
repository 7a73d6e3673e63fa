"""Shared type aliases for Samuel."""

from .common import JsonObject, JsonScalar, JsonValue, Severity

__all__ = ["JsonObject", "JsonScalar", "JsonValue", "Severity"]
