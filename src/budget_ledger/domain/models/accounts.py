"""Domain models for accounts."""

from dataclasses import dataclass

from budget_ledger.domain.constants import AccountType


@dataclass(frozen=True)
class Account:
    """Money-holding account with a running balance in minor units.

    Credit accounts hold a balance <= 0 while in debt.
    """

    id: str
    name: str
    account_type: AccountType
    balance: int = 0

    @property
    def is_credit(self) -> bool:
        """Return True for revolving credit accounts."""
        return self.account_type is AccountType.CREDIT

    @property
    def debt_owed(self) -> int:
        """Return the positive amount owed on the account, or 0."""
        return max(0, -self.balance)


__all__ = ["Account"]
