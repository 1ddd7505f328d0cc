"""Domain models package."""

from .accounts import Account
from .allocations import Allocation
from .budget import (
    AllocationSummary,
    CategoryBalance,
    CoverUnderfundedResult,
    UnderfundedStatus,
)
from .categories import Category
from .transactions import Transaction

__all__ = [
    "Account",
    "Allocation",
    "AllocationSummary",
    "Category",
    "CategoryBalance",
    "CoverUnderfundedResult",
    "Transaction",
    "UnderfundedStatus",
]
