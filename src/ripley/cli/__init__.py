"""Command-line interface for Ripley."""

from ripley.cli.main import cli

__all__ = ["cli"]
