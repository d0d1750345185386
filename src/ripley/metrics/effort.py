"""Effort classification for probe executions.

Python Justification: Pure grading logic with ordered precedence rules.
"""

from __future__ import annotations

from typing import Protocol

from ripley.core.results import EffortTier
from ripley.probes.definitions import ProbeDefinition

# Budget multiplier for the medium tier
MEDIUM_BUDGET_FACTOR = 2


class ClassifiableResult(Protocol):
    """Protocol for anything carrying the fields the classifier reads."""

    @property
    def passed(self) -> bool:
        """Whether the execution passed."""
        ...

    @property
    def tokens_used(self) -> int:
        """Tokens used by the response."""
        ...

    @property
    def duration_seconds(self) -> float:
        """Elapsed wall time in seconds."""
        ...


def within_budget(
    tokens_used: int,
    duration_seconds: float,
    probe: ProbeDefinition,
    factor: float = 1,
) -> bool:
    """Check tokens and duration against the probe budgets scaled by factor.

    Args:
        tokens_used: Tokens used by the response.
        duration_seconds: Elapsed wall time in fractional seconds.
        probe: Probe whose budgets apply.
        factor: Budget multiplier.

    Returns:
        True if both values are within the scaled budgets (inclusive).

    """
    return (
        tokens_used <= probe.max_tokens * factor
        and duration_seconds <= probe.max_duration_seconds * factor
    )


def classify_effort(result: ClassifiableResult, probe: ProbeDefinition) -> EffortTier:
    """Derive the effort tier for an execution result.

    First match wins:
        1. Failed results are poor.
        2. Within budgets is good.
        3. Within twice the budgets is medium.
        4. Anything else is poor.

    Args:
        result: Raw execution result.
        probe: Probe the result belongs to.

    Returns:
        The effort tier.

    """
    if not result.passed:
        return EffortTier.POOR

    if within_budget(result.tokens_used, result.duration_seconds, probe):
        return EffortTier.GOOD

    if within_budget(result.tokens_used, result.duration_seconds, probe, MEDIUM_BUDGET_FACTOR):
        return EffortTier.MEDIUM

    return EffortTier.POOR
