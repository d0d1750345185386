"""Shared test fixtures."""

from collections.abc import Callable, Generator
from datetime import datetime, timedelta, timezone

import pytest

from ripley.core.results import EffortTier, Outcome
from ripley.probes.definitions import ProbeDefinition
from ripley.storage.store import OutcomeStore

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def probe() -> ProbeDefinition:
    """Create a probe with 10 token / 5 second budgets."""
    return ProbeDefinition(
        name="TestBench",
        prompt="test",
        max_tokens=10,
        max_duration_seconds=5,
    )


@pytest.fixture
def make_outcome() -> Callable[..., Outcome]:
    """Factory for outcomes with increasing timestamps.

    The n-th call (0-based) is stamped BASE_TIME + n minutes unless
    created_at is given.
    """
    counter = {"n": 0}

    def _make(
        probe_name: str = "TestBench",
        passed: bool = True,
        tokens_used: int = 5,
        duration_seconds: float = 1.0,
        effort: EffortTier | None = None,
        created_at: datetime | None = None,
    ) -> Outcome:
        if effort is None:
            effort = EffortTier.GOOD if passed else EffortTier.POOR
        if created_at is None:
            created_at = BASE_TIME + timedelta(minutes=counter["n"])
        counter["n"] += 1
        return Outcome(
            probe_name=probe_name,
            passed=passed,
            tokens_used=tokens_used,
            duration_seconds=duration_seconds,
            effort=effort,
            output="ok",
            quote="quote",
            created_at=created_at,
        )

    return _make


@pytest.fixture
def memory_store() -> Generator[OutcomeStore, None, None]:
    """Create an in-memory outcome store."""
    with OutcomeStore(":memory:") as store:
        yield store
