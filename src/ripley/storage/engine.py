"""Engine creation for outcome storage.

Provides SQLite engine creation with pragmas and schema initialization.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.pool import StaticPool

from ripley.storage.schema import Base

MEMORY_DB = ":memory:"


def create_outcome_engine(db_path: str | Path = MEMORY_DB) -> Engine:
    """Create a SQLAlchemy engine for outcome storage.

    Args:
        db_path: Path to the SQLite database file, or ``":memory:"``.

    Returns:
        Configured SQLAlchemy Engine.

    """
    if str(db_path) == MEMORY_DB:
        # One shared connection, otherwise each checkout sees an empty database
        engine = create_engine(
            "sqlite://",
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        journal_mode = "MEMORY"
    else:
        engine = create_engine(f"sqlite:///{db_path}", echo=False)
        journal_mode = "WAL"

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):  # type: ignore[no-untyped-def]
        cursor = dbapi_conn.cursor()
        cursor.execute(f"PRAGMA journal_mode={journal_mode}")
        cursor.execute("PRAGMA busy_timeout=5000")
        cursor.close()

    return engine


def init_db(engine: Engine) -> None:
    """Create all tables and indexes if they do not exist."""
    Base.metadata.create_all(engine)
