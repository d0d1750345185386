"""Configuration loading system for Ripley.

This module provides Pydantic models and a ConfigLoader for parsing the
YAML daemon configuration.

Example:
    from ripley.config import ConfigLoader

    config, loaded = ConfigLoader().load_or_default("config.yaml")
    interval = config.daemon.interval_seconds

"""

from .constants import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_DB_PATH,
    DEFAULT_INTERVAL,
    DEFAULT_MODEL,
)
from .loader import ConfigLoader
from .models import (
    ClaudeConfig,
    ConfigurationError,
    DaemonConfig,
    LoggingConfig,
    MonitoringConfig,
    RipleyConfig,
    parse_duration,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_DB_PATH",
    "DEFAULT_INTERVAL",
    "DEFAULT_MODEL",
    "ClaudeConfig",
    "ConfigLoader",
    "ConfigurationError",
    "DaemonConfig",
    "LoggingConfig",
    "MonitoringConfig",
    "RipleyConfig",
    "parse_duration",
]
