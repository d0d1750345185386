"""Tests for ConfigLoader.

Python justification: Required for pytest testing framework.
"""

import logging
from pathlib import Path

import pytest

from ripley.config.loader import ConfigLoader
from ripley.config.models import ConfigurationError

VALID_CONFIG = """\
daemon:
  interval: "1h"
  db_path: "/tmp/test.db"
claude:
  model: "Opus"
monitoring:
  rolling_window: 20
  warning_threshold: 0.8
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(content)
    return path


class TestLoad:
    """Tests for ConfigLoader.load()."""

    def test_valid_config(self, tmp_path: Path) -> None:
        config = ConfigLoader().load(_write(tmp_path, VALID_CONFIG))

        assert config.daemon.interval == "1h"
        assert config.daemon.interval_seconds == 3600.0
        assert config.daemon.db_path == "/tmp/test.db"
        assert config.claude.model == "Opus"
        assert config.monitoring.rolling_window == 20
        assert config.monitoring.warning_threshold == 0.8

    def test_partial_config_uses_defaults(self, tmp_path: Path) -> None:
        config = ConfigLoader().load(_write(tmp_path, "monitoring:\n  rolling_window: 3\n"))

        assert config.monitoring.rolling_window == 3
        assert config.daemon.interval == "30m"
        assert config.claude.model == "Sonnet"

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config = ConfigLoader().load(_write(tmp_path, ""))
        assert config.monitoring.rolling_window == 10

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigLoader().load(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ConfigLoader().load(_write(tmp_path, "daemon: [unclosed\n"))

    def test_non_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigLoader().load(_write(tmp_path, "- a\n- b\n"))

    @pytest.mark.parametrize(
        ("content", "field"),
        [
            ('daemon:\n  interval: "invalid"\n', "daemon.interval"),
            ('daemon:\n  db_path: ""\n', "daemon.db_path"),
            ('claude:\n  model: ""\n', "claude.model"),
            ("monitoring:\n  rolling_window: 0\n", "monitoring.rolling_window"),
            ("monitoring:\n  warning_threshold: 1.5\n", "monitoring.warning_threshold"),
        ],
    )
    def test_invalid_values(self, tmp_path: Path, content: str, field: str) -> None:
        with pytest.raises(ConfigurationError, match=field.replace(".", r"\.")):
            ConfigLoader().load(_write(tmp_path, content))


class TestLoadOrDefault:
    """Tests for ConfigLoader.load_or_default()."""

    def test_missing_file_returns_defaults(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="ripley.config.loader"):
            config, loaded = ConfigLoader().load_or_default(tmp_path / "config.yaml")

        assert not loaded
        assert config.daemon.interval == "30m"
        assert "using default configuration" in caplog.text

    def test_existing_file_loaded(self, tmp_path: Path) -> None:
        config, loaded = ConfigLoader().load_or_default(_write(tmp_path, VALID_CONFIG))

        assert loaded
        assert config.claude.model == "Opus"

    def test_existing_invalid_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            ConfigLoader().load_or_default(_write(tmp_path, "monitoring:\n  rolling_window: -1\n"))
