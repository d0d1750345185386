"""Result types for probe executions.

This module provides the Pydantic models shared by the executor, the
effort classifier, storage and reporting:

    - ExecutionResult: raw result of one subprocess run, before classification
    - Outcome: the immutable, classified record of one probe execution
    - RecentOutcome: the row shape returned when querying recent outcomes

Python Justification: Pydantic validation of outcome invariants.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

TIMED_OUT_OUTPUT = "Timed out"


class EffortTier(str, Enum):
    """Effort classification for a probe execution."""

    GOOD = "good"
    MEDIUM = "medium"
    POOR = "poor"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ExecutionResult(BaseModel):
    """Raw result of running a probe, before effort classification.

    Attributes:
        probe_name: Name of the probe that was executed.
        passed: Whether the run met its budgets and exited cleanly.
        tokens_used: Whitespace-delimited word count of the output.
        duration_seconds: Wall time from launch to exit or termination.
        output: Trimmed combined stdout/stderr, or a marker/error text.
        exit_code: Process exit status (None if never launched or killed).
        timed_out: Whether the process was killed by the timeout.
        launch_error: Whether the process failed to launch at all.

    """

    model_config = ConfigDict(frozen=True)

    probe_name: str
    passed: bool
    tokens_used: int = Field(default=0, ge=0)
    duration_seconds: float = Field(default=0.0, ge=0.0)
    output: str = ""
    exit_code: int | None = None
    timed_out: bool = False
    launch_error: bool = False


class Outcome(BaseModel):
    """The recorded result of one probe execution.

    Created exactly once per execution and never mutated. A failed outcome
    is always classified as poor effort.
    """

    model_config = ConfigDict(frozen=True)

    probe_name: str = Field(..., min_length=1)
    passed: bool
    tokens_used: int = Field(default=0, ge=0)
    duration_seconds: float = Field(default=0.0, ge=0.0)
    effort: EffortTier
    output: str = ""
    quote: str = ""
    created_at: datetime = Field(default_factory=_utc_now)

    @model_validator(mode="after")
    def _failed_is_poor(self) -> Outcome:
        if not self.passed and self.effort is not EffortTier.POOR:
            raise ValueError(f"failed outcome must have poor effort, got {self.effort.value}")
        return self

    @property
    def duration_ms(self) -> int:
        """Duration in whole milliseconds, as persisted."""
        return int(self.duration_seconds * 1000)


class RecentOutcome(BaseModel):
    """One row of the rolling window, as returned by an outcome source."""

    model_config = ConfigDict(frozen=True)

    tokens_used: int = Field(default=0, ge=0)
    duration_ms: int = Field(default=0, ge=0)
    passed: bool = False
