"""Domain constants for the budget ledger."""

from enum import Enum


class AccountType(str, Enum):
    """Kinds of accounts that can hold money."""

    CHECKING = "checking"
    SAVINGS = "savings"
    CASH = "cash"
    CREDIT = "credit"


class TransactionType(str, Enum):
    """Kinds of transactions recorded against an account."""

    NORMAL = "normal"
    TRANSFER = "transfer"


PAYMENT_CATEGORY_SUFFIX = " Payment"
STARTING_BALANCE_DESCRIPTION = "Starting balance"

PERIOD_MAX_PAST_YEARS = 2
PERIOD_MAX_FUTURE_YEARS = 5


__all__ = [
    "AccountType",
    "TransactionType",
    "PAYMENT_CATEGORY_SUFFIX",
    "STARTING_BALANCE_DESCRIPTION",
    "PERIOD_MAX_PAST_YEARS",
    "PERIOD_MAX_FUTURE_YEARS",
]
