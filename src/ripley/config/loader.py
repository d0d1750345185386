"""Configuration loader for Ripley.

Loads config.yaml, validates it with Pydantic, and falls back to defaults
when no configuration file exists.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import ConfigurationError, RipleyConfig

logger = logging.getLogger(__name__)


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err["loc"])
        parts.append(f"{location}: {err['msg']}" if location else err["msg"])
    return "; ".join(parts)


class ConfigLoader:
    """Load Ripley configuration files.

    Example:
        loader = ConfigLoader()
        config, loaded = loader.load_or_default("config.yaml")

    """

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        """Load a YAML file.

        Args:
            path: Path to YAML file

        Returns:
            Parsed YAML content as dict

        Raises:
            ConfigurationError: If file cannot be read or parsed

        """
        try:
            with open(path) as f:
                content = yaml.safe_load(f)
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {path}")
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {path}: {e}")
        except PermissionError:
            raise ConfigurationError(f"Permission denied reading: {path}")

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(f"Expected a mapping at the top level of {path}")
        return content

    def load(self, path: str | Path) -> RipleyConfig:
        """Load and validate a configuration file.

        Args:
            path: Path to config.yaml

        Returns:
            Validated RipleyConfig

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid

        """
        path = Path(path)
        data = self._load_yaml(path)
        try:
            return RipleyConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {path}: {_format_validation_error(e)}"
            ) from e

    def load_defaults(self) -> RipleyConfig:
        """Return a configuration with default values."""
        return RipleyConfig()

    def load_or_default(self, path: str | Path) -> tuple[RipleyConfig, bool]:
        """Load a configuration file, or defaults if it does not exist.

        Args:
            path: Path to config.yaml

        Returns:
            Tuple of (config, loaded_from_file)

        Raises:
            ConfigurationError: If the file exists but is invalid

        """
        path = Path(path)
        if not path.exists():
            logger.info(f"{path} not found, using default configuration")
            return self.load_defaults(), False

        config = self.load(path)
        logger.info(f"Loaded configuration from {path}")
        return config, True
