"""Read-side snapshot of the ledger history.

Calculators work on plain collections loaded once per unit of work, so a
read never depends on cached aggregates that could drift from the records.
"""

from dataclasses import dataclass

from budget_ledger.application.ports.ledger_store import LedgerRepositoryPort
from budget_ledger.domain.models import (
    Account,
    Allocation,
    Category,
    CategoryBalance,
    Transaction,
    UnderfundedStatus,
)
from budget_ledger.domain.services import (
    compute_category_balance,
    compute_ready_to_assign,
    detect_underfunded,
)


@dataclass(frozen=True)
class LedgerSnapshot:
    """Full ledger history captured inside one unit of work."""

    accounts: dict[str, Account]
    categories: list[Category]
    allocations: list[Allocation]
    transactions: list[Transaction]

    @classmethod
    def load(cls, ledger: LedgerRepositoryPort) -> "LedgerSnapshot":
        """Read every record needed by the calculators.

        Args:
            ledger: Repository bound to the current unit of work.

        Returns:
            LedgerSnapshot: Accounts, categories, allocations, transactions.
        """
        return cls(
            accounts={account.id: account for account in ledger.list_accounts()},
            categories=ledger.list_categories(),
            allocations=ledger.list_allocations(),
            transactions=ledger.list_transactions(),
        )

    @property
    def category_names(self) -> dict[str, str]:
        """Return category names keyed by identifier."""
        return {category.id: category.name for category in self.categories}

    def allocation_for(self, category_id: str, period: str) -> Allocation | None:
        """Return the allocation of a category for one period."""
        for allocation in self.allocations:
            if allocation.category_id == category_id and allocation.period == period:
                return allocation
        return None

    def category_balance(self, category_id: str, period: str) -> CategoryBalance:
        """Return the rollover balance of a category."""
        return compute_category_balance(
            category_id,
            period,
            self.allocations,
            self.transactions,
        )

    def underfunded(
        self,
        category: Category,
        period: str,
    ) -> UnderfundedStatus | None:
        """Return the underfunded status of a payment category.

        Args:
            category: Category to inspect.
            period: Period used for the category balance.

        Returns:
            UnderfundedStatus | None: None for regular categories or when the
            shadowed credit account no longer exists.
        """
        if not category.is_payment:
            return None
        account = self.accounts.get(category.payment_for_account_id)
        if account is None:
            return None
        balance = self.category_balance(category.id, period)
        return detect_underfunded(
            account,
            balance.available,
            [txn for txn in self.transactions if txn.account_id == account.id],
            self.allocations,
            self.category_names,
        )

    def ready_to_assign(self, period: str) -> int:
        """Return Ready to Assign through ``period``."""
        return compute_ready_to_assign(
            period,
            self.transactions,
            self.allocations,
        )


__all__ = ["LedgerSnapshot"]
