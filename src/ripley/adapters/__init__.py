"""Adapters module for agent CLIs.

Adapters build the non-interactive invocation of a specific AI agent.
"""

from ripley.adapters.base import (
    AdapterConfig,
    AdapterError,
    AdapterValidationError,
    BaseAdapter,
)
from ripley.adapters.claude_code import ClaudeCodeAdapter

__all__ = [
    "AdapterConfig",
    "AdapterError",
    "AdapterValidationError",
    "BaseAdapter",
    "ClaudeCodeAdapter",
]
