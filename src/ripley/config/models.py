"""Pydantic models for Ripley configuration.

This module defines the configuration schema loaded from config.yaml.
Every section is optional; missing values fall back to the defaults below.

Python Justification: Required for YAML parsing and Pydantic validation capabilities.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

from ripley.config.constants import (
    DEFAULT_DB_PATH,
    DEFAULT_INTERVAL,
    DEFAULT_MODEL,
    DEFAULT_ROLLING_WINDOW,
    DEFAULT_WARNING_THRESHOLD,
)


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


# Go-style duration units, in seconds
_DURATION_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "μs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> float:
    """Parse a duration string such as "30m", "1h30m" or "1.5s".

    Args:
        text: Duration string. A leading sign is allowed; "0" is accepted
            without a unit.

    Returns:
        Duration in seconds.

    Raises:
        ValueError: If the string is not a valid duration.

    """
    s = text.strip()
    if not s:
        raise ValueError("empty duration")

    sign = 1.0
    if s[0] in "+-":
        sign = -1.0 if s[0] == "-" else 1.0
        s = s[1:]

    if s == "0":
        return 0.0

    total = 0.0
    pos = 0
    while pos < len(s):
        match = _DURATION_PART.match(s, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r}")
        total += float(match.group(1)) * _DURATION_UNITS[match.group(2)]
        pos = match.end()

    return sign * total


class DaemonConfig(BaseModel):
    """Daemon loop and storage settings."""

    interval: str = Field(default=DEFAULT_INTERVAL, description="Time between cycles, e.g. 30m")
    db_path: str = Field(default=DEFAULT_DB_PATH, description="SQLite database path")

    @field_validator("interval")
    @classmethod
    def validate_interval(cls, v: str) -> str:
        """Validate the interval is a positive duration."""
        if not v or not v.strip():
            raise ValueError("daemon.interval is required")
        try:
            seconds = parse_duration(v)
        except ValueError as e:
            raise ValueError(
                f"daemon.interval must be a valid duration (e.g. '30m', '1h'): {e}"
            ) from e
        if seconds <= 0:
            raise ValueError("daemon.interval must be positive")
        return v

    @field_validator("db_path")
    @classmethod
    def validate_db_path(cls, v: str) -> str:
        """Validate the database path is set."""
        if not v or not v.strip():
            raise ValueError("daemon.db_path is required")
        return v

    @property
    def interval_seconds(self) -> float:
        """Interval between cycles in seconds."""
        return parse_duration(self.interval)


class ClaudeConfig(BaseModel):
    """Agent CLI settings."""

    model: str = Field(default=DEFAULT_MODEL)
    executable: str = Field(default="claude")
    extra_args: list[str] = Field(default_factory=list)
    env: dict[str, str] = Field(default_factory=dict)

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str) -> str:
        """Validate the model name is set."""
        if not v or not v.strip():
            raise ValueError("claude.model is required")
        return v


class MonitoringConfig(BaseModel):
    """Rolling statistics settings."""

    rolling_window: int = Field(default=DEFAULT_ROLLING_WINDOW, gt=0)
    warning_threshold: float = Field(default=DEFAULT_WARNING_THRESHOLD, ge=0.0, le=1.0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level


class RipleyConfig(BaseModel):
    """Top-level Ripley configuration.

    Maps to config.yaml
    """

    daemon: DaemonConfig = Field(default_factory=DaemonConfig)
    claude: ClaudeConfig = Field(default_factory=ClaudeConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
