"""Tests for the SQLite outcome store.

Python justification: Required for pytest testing framework.
"""

from collections.abc import Callable
from datetime import timedelta
from pathlib import Path

import pytest
from sqlalchemy import select
from sqlalchemy.orm import Session

from ripley.core.results import EffortTier, Outcome
from ripley.storage.schema import OutcomeRow
from ripley.storage.store import OutcomeStore, PersistenceError


class TestInsert:
    """Tests for OutcomeStore.insert."""

    def test_insert_persists_all_fields(
        self, memory_store: OutcomeStore, make_outcome: Callable[..., Outcome]
    ) -> None:
        outcome = make_outcome(tokens_used=7, duration_seconds=1.5, effort=EffortTier.MEDIUM)

        memory_store.insert(outcome)

        with Session(memory_store._engine) as session:
            row = session.execute(select(OutcomeRow)).scalar_one()
        assert row.name == "TestBench"
        assert row.passed is True
        assert row.tokens_used == 7
        assert row.duration_ms == 1500
        assert row.effort == "medium"
        assert row.quote == "quote"
        assert row.output == "ok"
        assert row.timestamp == outcome.created_at.replace(tzinfo=None)

    def test_count(self, memory_store: OutcomeStore, make_outcome: Callable[..., Outcome]) -> None:
        memory_store.insert(make_outcome())
        memory_store.insert(make_outcome(probe_name="Other"))

        assert memory_store.count() == 2
        assert memory_store.count("Other") == 1
        assert memory_store.count("Missing") == 0

    def test_database_error_wrapped(
        self, memory_store: OutcomeStore, make_outcome: Callable[..., Outcome]
    ) -> None:
        OutcomeRow.__table__.drop(memory_store._engine)

        with pytest.raises(PersistenceError, match="Failed to insert outcome for TestBench"):
            memory_store.insert(make_outcome())

    def test_query_error_wrapped(self, memory_store: OutcomeStore) -> None:
        OutcomeRow.__table__.drop(memory_store._engine)

        with pytest.raises(PersistenceError, match="Failed to query outcomes"):
            memory_store.query_recent("TestBench", 10)


class TestQueryRecent:
    """Tests for OutcomeStore.query_recent."""

    def test_newest_first(
        self, memory_store: OutcomeStore, make_outcome: Callable[..., Outcome]
    ) -> None:
        for tokens in (1, 2, 3):
            memory_store.insert(make_outcome(tokens_used=tokens))

        rows = memory_store.query_recent("TestBench", 10)

        assert [r.tokens_used for r in rows] == [3, 2, 1]

    def test_orders_by_timestamp_not_insertion(
        self, memory_store: OutcomeStore, make_outcome: Callable[..., Outcome]
    ) -> None:
        late = make_outcome(tokens_used=2)
        early = make_outcome(tokens_used=1, created_at=late.created_at - timedelta(hours=1))
        memory_store.insert(late)
        memory_store.insert(early)

        rows = memory_store.query_recent("TestBench", 10)

        assert [r.tokens_used for r in rows] == [2, 1]

    def test_same_timestamp_newest_insert_first(
        self, memory_store: OutcomeStore, make_outcome: Callable[..., Outcome]
    ) -> None:
        first = make_outcome(tokens_used=1)
        memory_store.insert(first)
        memory_store.insert(make_outcome(tokens_used=2, created_at=first.created_at))

        rows = memory_store.query_recent("TestBench", 10)

        assert [r.tokens_used for r in rows] == [2, 1]

    def test_limit(self, memory_store: OutcomeStore, make_outcome: Callable[..., Outcome]) -> None:
        for tokens in range(5):
            memory_store.insert(make_outcome(tokens_used=tokens))

        rows = memory_store.query_recent("TestBench", 2)

        assert [r.tokens_used for r in rows] == [4, 3]

    def test_scoped_to_probe(
        self, memory_store: OutcomeStore, make_outcome: Callable[..., Outcome]
    ) -> None:
        memory_store.insert(make_outcome(probe_name="A", tokens_used=1))
        memory_store.insert(make_outcome(probe_name="B", tokens_used=2))

        rows = memory_store.query_recent("A", 10)

        assert [r.tokens_used for r in rows] == [1]

    def test_empty(self, memory_store: OutcomeStore) -> None:
        assert memory_store.query_recent("TestBench", 10) == []

    def test_row_shape(
        self, memory_store: OutcomeStore, make_outcome: Callable[..., Outcome]
    ) -> None:
        memory_store.insert(make_outcome(passed=False, tokens_used=0, duration_seconds=2.5))

        (row,) = memory_store.query_recent("TestBench", 1)

        assert row.passed is False
        assert row.duration_ms == 2500


class TestFileDatabase:
    """Tests for file-backed databases."""

    def test_persists_across_reopen(
        self, tmp_path: Path, make_outcome: Callable[..., Outcome]
    ) -> None:
        db_path = tmp_path / "ripley.db"
        with OutcomeStore(db_path) as store:
            store.insert(make_outcome(tokens_used=9))

        with OutcomeStore(db_path) as store:
            rows = store.query_recent("TestBench", 10)

        assert [r.tokens_used for r in rows] == [9]

    def test_unopenable_path(self, tmp_path: Path) -> None:
        with pytest.raises(PersistenceError, match="Failed to initialize database"):
            OutcomeStore(tmp_path / "missing-dir" / "ripley.db")
