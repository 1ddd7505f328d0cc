"""Domain package for business rules and core models."""

from .constants import AccountType, TransactionType
from .errors import (
    InsufficientFundsError,
    InternalError,
    InvalidInputError,
    LedgerError,
    NotAPaymentCategoryError,
    NotFoundError,
    NotUnderfundedError,
)
from .models import (
    Account,
    Allocation,
    AllocationSummary,
    Category,
    CategoryBalance,
    CoverUnderfundedResult,
    Transaction,
    UnderfundedStatus,
)
from .policies import period_of, validate_identifier, validate_period
from .services import (
    compute_category_balance,
    compute_ready_to_assign,
    detect_underfunded,
)

__all__ = [
    "AccountType",
    "TransactionType",
    "LedgerError",
    "NotFoundError",
    "InvalidInputError",
    "NotAPaymentCategoryError",
    "NotUnderfundedError",
    "InsufficientFundsError",
    "InternalError",
    "Account",
    "Allocation",
    "AllocationSummary",
    "Category",
    "CategoryBalance",
    "CoverUnderfundedResult",
    "Transaction",
    "UnderfundedStatus",
    "period_of",
    "validate_identifier",
    "validate_period",
    "compute_category_balance",
    "compute_ready_to_assign",
    "detect_underfunded",
]
