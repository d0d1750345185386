"""SQLite-backed outcome store.

OutcomeStore is both the outcome sink used by the executor and the outcome
source used by the rolling statistics aggregator. All queries use
SQLAlchemy 2.0 style (select() + session.execute()).
"""

from __future__ import annotations

import logging
from datetime import timezone
from pathlib import Path
from types import TracebackType
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from ripley.core.results import Outcome, RecentOutcome
from ripley.storage.engine import MEMORY_DB, create_outcome_engine, init_db
from ripley.storage.schema import OutcomeRow

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when recording or querying outcomes fails."""

    pass


class OutcomeSink(Protocol):
    """Protocol for append-only outcome recorders."""

    def insert(self, outcome: Outcome) -> None:
        """Record one outcome, raising PersistenceError on failure."""
        ...


class OutcomeStore:
    """Append-only store of probe outcomes.

    Example:
        >>> with OutcomeStore("ripley.db") as store:
        ...     store.insert(outcome)
        ...     rows = store.query_recent("Sum1to100", 10)

    """

    def __init__(self, db_path: str | Path = MEMORY_DB) -> None:
        """Open (or create) the database and initialize the schema.

        Args:
            db_path: Path to the SQLite file, or ``":memory:"``.

        Raises:
            PersistenceError: If the database cannot be opened or initialized.

        """
        self.db_path = str(db_path)
        try:
            self._engine = create_outcome_engine(db_path)
            init_db(self._engine)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to initialize database {self.db_path}: {e}") from e
        self._session_factory = sessionmaker(bind=self._engine, expire_on_commit=False)

    def __enter__(self) -> OutcomeStore:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Dispose of the underlying engine."""
        self._engine.dispose()

    def _session(self) -> Session:
        return self._session_factory()

    def insert(self, outcome: Outcome) -> None:
        """Save an outcome.

        Args:
            outcome: Outcome to record.

        Raises:
            PersistenceError: If the insert fails.

        """
        created_at = outcome.created_at
        if created_at.tzinfo is not None:
            created_at = created_at.astimezone(timezone.utc).replace(tzinfo=None)

        row = OutcomeRow(
            name=outcome.probe_name,
            passed=outcome.passed,
            tokens_used=outcome.tokens_used,
            duration_ms=outcome.duration_ms,
            effort=outcome.effort.value,
            quote=outcome.quote,
            output=outcome.output,
            timestamp=created_at,
        )
        try:
            with self._session() as session, session.begin():
                session.add(row)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to insert outcome for {outcome.probe_name}: {e}") from e
        logger.debug(f"Recorded outcome for {outcome.probe_name} (id={row.id})")

    def query_recent(self, probe_name: str, limit: int) -> list[RecentOutcome]:
        """Return the most recent outcomes for a probe, newest first.

        Args:
            probe_name: Probe to query.
            limit: Maximum number of rows.

        Returns:
            Up to limit rows ordered by timestamp descending.

        Raises:
            PersistenceError: If the query fails.

        """
        stmt = (
            select(OutcomeRow.tokens_used, OutcomeRow.duration_ms, OutcomeRow.passed)
            .where(OutcomeRow.name == probe_name)
            .order_by(OutcomeRow.timestamp.desc(), OutcomeRow.id.desc())
            .limit(limit)
        )
        try:
            with self._session() as session:
                rows = session.execute(stmt).all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to query outcomes for {probe_name}: {e}") from e

        return [
            RecentOutcome(tokens_used=tokens, duration_ms=duration_ms, passed=passed)
            for tokens, duration_ms, passed in rows
        ]

    def count(self, probe_name: str | None = None) -> int:
        """Count stored outcomes, optionally for one probe."""
        stmt = select(func.count(OutcomeRow.id))
        if probe_name is not None:
            stmt = stmt.where(OutcomeRow.name == probe_name)
        try:
            with self._session() as session:
                return int(session.execute(stmt).scalar_one())
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to count outcomes: {e}") from e
