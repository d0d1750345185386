"""Outcome persistence backed by SQLite through SQLAlchemy."""

from ripley.storage.engine import MEMORY_DB, create_outcome_engine, init_db
from ripley.storage.schema import Base, OutcomeRow
from ripley.storage.store import OutcomeSink, OutcomeStore, PersistenceError

__all__ = [
    "MEMORY_DB",
    "Base",
    "OutcomeRow",
    "OutcomeSink",
    "OutcomeStore",
    "PersistenceError",
    "create_outcome_engine",
    "init_db",
]
