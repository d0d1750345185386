"""Rolling statistics over recent probe outcomes.

This module computes windowed averages over the most recent outcomes of a
probe. The window is selected by the outcome source (newest first, truncated
to the window size); aggregation divides by the number of rows actually
returned, never by the window size, and an empty window yields zeros.

Python Justification: Required for windowed aggregation with edge case handling.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ripley.core.results import RecentOutcome


class OutcomeSource(Protocol):
    """Protocol for stores that can return recent outcomes."""

    def query_recent(self, probe_name: str, limit: int) -> list[RecentOutcome]:
        """Return up to limit outcomes for probe_name, newest first."""
        ...


@dataclass(frozen=True)
class RollingAggregate:
    """Aggregate statistics over a rolling window.

    Attributes:
        avg_tokens: Mean tokens used.
        avg_duration_seconds: Mean duration in seconds.
        pass_rate: Fraction of passed outcomes (0.0 to 1.0).
        count: Number of outcomes in the window.

    """

    avg_tokens: float = 0.0
    avg_duration_seconds: float = 0.0
    pass_rate: float = 0.0
    count: int = 0

    def is_degraded(self, warning_threshold: float) -> bool:
        """Whether the pass rate is below the warning threshold."""
        return self.pass_rate < warning_threshold


def aggregate_window(rows: Sequence[RecentOutcome]) -> RollingAggregate:
    """Aggregate a window of recent outcomes.

    Args:
        rows: Outcomes in the window.

    Returns:
        RollingAggregate over exactly these rows, all zeros if empty.

    """
    if not rows:
        return RollingAggregate()

    count = len(rows)
    total_tokens = sum(row.tokens_used for row in rows)
    total_duration_ms = sum(row.duration_ms for row in rows)
    passed = sum(1.0 if row.passed else 0.0 for row in rows)

    return RollingAggregate(
        avg_tokens=total_tokens / count,
        avg_duration_seconds=(total_duration_ms / count) / 1000.0,
        pass_rate=passed / count,
        count=count,
    )


def rolling_stats(source: OutcomeSource, probe_name: str, window: int) -> RollingAggregate:
    """Compute rolling statistics for a probe.

    Args:
        source: Store holding recorded outcomes.
        probe_name: Probe to aggregate. Unknown names yield zeros.
        window: Number of most recent outcomes to consider.

    Returns:
        RollingAggregate over the most recent outcomes.

    Raises:
        ValueError: If window is less than 1.

    """
    if window < 1:
        raise ValueError(f"Window size must be at least 1, got {window}")

    rows = source.query_recent(probe_name, window)
    # Sources are expected to truncate; guard against ones that do not
    return aggregate_window(rows[:window])
