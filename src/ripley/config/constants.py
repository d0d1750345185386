"""Shared default values for Ripley configuration.

This module is the single source of truth for configuration defaults.
"""

DEFAULT_CONFIG_PATH: str = "config.yaml"
DEFAULT_INTERVAL: str = "30m"
DEFAULT_DB_PATH: str = "./ripley.db"
DEFAULT_MODEL: str = "Sonnet"
DEFAULT_ROLLING_WINDOW: int = 10
DEFAULT_WARNING_THRESHOLD: float = 0.7
