"""Domain models for transactions."""

from dataclasses import dataclass
from datetime import date

from budget_ledger.domain.constants import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Signed money movement on an account.

    Positive amounts are inflows, negative amounts are outflows.
    """

    id: str
    account_id: str
    amount: int
    date: date
    description: str = ""
    category_id: str | None = None
    transaction_type: TransactionType = TransactionType.NORMAL
    transfer_account_id: str | None = None
    import_token: str | None = None

    @property
    def period(self) -> str:
        """Return the ``YYYY-MM`` period the transaction belongs to."""
        return f"{self.date.year:04d}-{self.date.month:02d}"

    @property
    def is_transfer(self) -> bool:
        """Return True for transfers between accounts."""
        return self.transaction_type is TransactionType.TRANSFER


__all__ = ["Transaction"]
