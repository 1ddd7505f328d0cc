"""Database ports for the budget ledger.

This module defines the application-layer protocol for accessing the ledger
database engine. Infrastructure implementations provide concrete adapters
that satisfy it.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the ledger database engine.

    Store adapters depend on this protocol instead of concrete database
    drivers or configuration details.
    """

    def get_ledger_engine(self) -> Engine:
        """Get the engine for the ledger database.

        Returns:
            Engine: SQLAlchemy engine connected to the ledger store.
        """


__all__ = ["DatabaseEnginePort"]
