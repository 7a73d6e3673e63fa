"""Shared constants for Samuel."""
