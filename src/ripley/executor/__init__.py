"""Execution engine for running probes against agent CLIs."""

from ripley.executor.runner import KILL_GRACE_SECONDS, ProbeExecutor, count_tokens

__all__ = [
    "KILL_GRACE_SECONDS",
    "ProbeExecutor",
    "count_tokens",
]
