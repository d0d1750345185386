"""Core result types shared across Ripley modules."""

from ripley.core.results import (
    TIMED_OUT_OUTPUT,
    EffortTier,
    ExecutionResult,
    Outcome,
    RecentOutcome,
)

__all__ = [
    "TIMED_OUT_OUTPUT",
    "EffortTier",
    "ExecutionResult",
    "Outcome",
    "RecentOutcome",
]
