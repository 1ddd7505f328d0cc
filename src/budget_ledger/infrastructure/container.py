"""Composition root for wiring infrastructure adapters."""

from budget_ledger.application.ports.database import DatabaseEnginePort
from budget_ledger.application.ports.ledger_store import LedgerStorePort
from budget_ledger.application.use_cases import (
    CalculateReadyToAssignUseCase,
    CoverUnderfundedUseCase,
    CreateTransactionUseCase,
    GetAllocationSummaryUseCase,
)
from budget_ledger.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from budget_ledger.infrastructure.ledger_repository import (
    SqlAlchemyLedgerStore,
)
from budget_ledger.infrastructure.logging.logger import get_app_logger
from budget_ledger.infrastructure.memory_store import InMemoryLedgerStore
from budget_ledger.infrastructure.settings import LedgerSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_store(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerStorePort:
    """Return the configured ledger store."""
    resolved_settings = settings or LedgerSettings.from_env()
    if resolved_settings.backend == "memory":
        return InMemoryLedgerStore()
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerStore(
        resolved_db,
        isolation_level=resolved_settings.isolation_level,
        logger=get_app_logger(),
    )


def build_create_transaction_use_case(
    store: LedgerStorePort | None = None,
) -> CreateTransactionUseCase:
    """Return the transaction processor bound to the configured store."""
    return CreateTransactionUseCase(
        store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_ready_to_assign_use_case(
    store: LedgerStorePort | None = None,
) -> CalculateReadyToAssignUseCase:
    """Return the Ready to Assign calculator."""
    return CalculateReadyToAssignUseCase(
        store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_allocation_summary_use_case(
    store: LedgerStorePort | None = None,
) -> GetAllocationSummaryUseCase:
    """Return the allocation summary use case."""
    return GetAllocationSummaryUseCase(
        store or build_ledger_store(),
        logger=get_app_logger(),
    )


def build_cover_underfunded_use_case(
    store: LedgerStorePort | None = None,
) -> CoverUnderfundedUseCase:
    """Return the cover-underfunded use case."""
    return CoverUnderfundedUseCase(
        store or build_ledger_store(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_store",
    "build_create_transaction_use_case",
    "build_ready_to_assign_use_case",
    "build_allocation_summary_use_case",
    "build_cover_underfunded_use_case",
]
