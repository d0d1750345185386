"""Console formatting for outcomes and rolling statistics.

Python justification: Terminal output formatting.
"""

from __future__ import annotations

from collections.abc import Iterable

from ripley.core.results import Outcome
from ripley.metrics.rolling import RollingAggregate

STATUS_OK = "✓"
STATUS_WARNING = "⚠"


def format_outcome(outcome: Outcome) -> str:
    """Format a single outcome as a multi-line report block."""
    status = "PASS" if outcome.passed else "FAIL"
    return (
        f"[{status}] {outcome.probe_name} | Effort: {outcome.effort.value} | "
        f"Tokens: {outcome.tokens_used} | Duration: {outcome.duration_seconds:.2f}s\n"
        f"Quote: {outcome.quote}\n"
        f"Output: {outcome.output}"
    )


def format_outcomes(outcomes: Iterable[Outcome]) -> str:
    """Format outcomes separated by blank lines."""
    return "\n\n".join(format_outcome(o) for o in outcomes)


def format_rolling(name: str, aggregate: RollingAggregate, warning_threshold: float) -> str:
    """Format one rolling statistics line.

    Args:
        name: Probe name.
        aggregate: Rolling aggregate for the probe.
        warning_threshold: Pass rate below which the line is flagged.

    Returns:
        Single-line summary with a status marker.

    """
    status = STATUS_WARNING if aggregate.is_degraded(warning_threshold) else STATUS_OK
    return (
        f"{status} {name} | Avg Tokens: {aggregate.avg_tokens:.1f} | "
        f"Avg Duration: {aggregate.avg_duration_seconds:.2f}s | "
        f"Pass Rate: {aggregate.pass_rate * 100:.0f}%"
    )


def rolling_header(window: int) -> str:
    """Header line for the rolling statistics section."""
    return f"=== Rolling Statistics (Last {window} Runs) ==="
