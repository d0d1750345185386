"""Metrics module: effort classification and rolling statistics."""

from ripley.metrics.effort import MEDIUM_BUDGET_FACTOR, classify_effort, within_budget
from ripley.metrics.rolling import (
    OutcomeSource,
    RollingAggregate,
    aggregate_window,
    rolling_stats,
)

__all__ = [
    "MEDIUM_BUDGET_FACTOR",
    "OutcomeSource",
    "RollingAggregate",
    "aggregate_window",
    "classify_effort",
    "rolling_stats",
    "within_budget",
]
