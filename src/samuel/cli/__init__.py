"""Command-line interface for Samuel."""
