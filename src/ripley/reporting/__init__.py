"""Reporting module for console output."""

from ripley.reporting.console import (
    STATUS_OK,
    STATUS_WARNING,
    format_outcome,
    format_outcomes,
    format_rolling,
    rolling_header,
)

__all__ = [
    "STATUS_OK",
    "STATUS_WARNING",
    "format_outcome",
    "format_outcomes",
    "format_rolling",
    "rolling_header",
]
