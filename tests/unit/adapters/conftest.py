"""Shared test fixtures for adapter tests."""

import pytest

from ripley.adapters.base import AdapterConfig


@pytest.fixture
def adapter_config() -> AdapterConfig:
    """Create standard adapter configuration."""
    return AdapterConfig(model="Sonnet")
