"""Application use cases package."""

from .calculate_ready_to_assign import CalculateReadyToAssignUseCase
from .cover_underfunded import CoverUnderfundedUseCase
from .create_transaction import CreateTransactionUseCase
from .get_allocation_summary import GetAllocationSummaryUseCase
from .ledger_snapshot import LedgerSnapshot
from .manage_accounts import (
    CreateAccountUseCase,
    CreateCategoryUseCase,
    DeleteAccountUseCase,
)
from .manage_allocations import (
    DeleteAllocationUseCase,
    ListAllocationsUseCase,
    SetAllocationUseCase,
)
from .manage_transactions import (
    DeleteTransactionUseCase,
    UpdateTransactionUseCase,
)

__all__ = [
    "CalculateReadyToAssignUseCase",
    "CoverUnderfundedUseCase",
    "CreateTransactionUseCase",
    "GetAllocationSummaryUseCase",
    "LedgerSnapshot",
    "CreateAccountUseCase",
    "CreateCategoryUseCase",
    "DeleteAccountUseCase",
    "DeleteAllocationUseCase",
    "ListAllocationsUseCase",
    "SetAllocationUseCase",
    "DeleteTransactionUseCase",
    "UpdateTransactionUseCase",
]
