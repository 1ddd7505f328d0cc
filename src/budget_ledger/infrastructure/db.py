"""Database infrastructure for the budget ledger.

This module exposes concrete helpers to create and reuse the SQLAlchemy
engine connected to the ledger database. It belongs to the infrastructure
layer because it deals with external systems.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool, StaticPool

from budget_ledger.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str, default: str | None = None) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.
        default: Value used when the variable is unset.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name) or default
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _configure_sqlite_connection(dbapi_connection, _connection_record) -> None:
    # BEGIN is emitted by the begin listener, never by pysqlite.
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _begin_sqlite_immediate(conn) -> None:
    """Open SQLite transactions with the write lock already held.

    Reads done before the first write of a unit of work then belong to the
    same serialized transaction, so a concurrent unit waits instead of
    acting on the same stale figures.
    """
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine for the ledger database.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled. SQLite engines enforce foreign keys and begin
        every transaction with BEGIN IMMEDIATE; in-memory SQLite shares a
        single connection.
    """
    if not db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            poolclass=QueuePool,
            pool_size=5,
            max_overflow=5,
            pool_pre_ping=True,
            future=True,
        )

    in_memory = db_url in ("sqlite://", "sqlite:///:memory:")
    engine = create_engine(
        db_url,
        poolclass=StaticPool if in_memory else QueuePool,
        connect_args={"check_same_thread": False},
        pool_pre_ping=True,
        future=True,
    )
    event.listen(engine, "connect", _configure_sqlite_connection)
    event.listen(engine, "begin", _begin_sqlite_immediate)
    return engine


DEFAULT_DB_URL = "sqlite:///budget.db"

_ledger_engine: Optional[Engine] = None


def get_ledger_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the ledger database.

    Returns:
        Engine: Lazily initialized engine connected to ``BUDGET_DB_URL``.
    """
    global _ledger_engine
    if _ledger_engine is None:
        db_url = _get_env_var("BUDGET_DB_URL", DEFAULT_DB_URL)
        _ledger_engine = _create_engine(db_url)
    return _ledger_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by SQLAlchemy engines.

    The adapter hides configuration details (environment variables, pooling)
    behind the port so store adapters depend only on the protocol.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        """Initialize the adapter.

        Args:
            engine: Optional explicit engine; the shared singleton otherwise.
        """
        self._engine = engine

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger store.
        """
        if self._engine is not None:
            return self._engine
        return get_ledger_engine()


__all__ = [
    "get_ledger_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
