"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_store import LedgerRepositoryPort, LedgerStorePort

__all__ = [
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
    "LedgerStorePort",
]
