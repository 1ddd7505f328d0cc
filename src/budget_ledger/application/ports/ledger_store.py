"""Ports for durable ledger storage.

The store groups reads and writes into units of work. A unit of work either
commits every write it performed or none of them, which is what compound
operations such as transaction creation rely on for compensation.
"""

from contextlib import AbstractContextManager
from typing import Protocol

from budget_ledger.domain.models import (
    Account,
    Allocation,
    Category,
    Transaction,
)


class LedgerRepositoryPort(Protocol):
    """Record access bound to a single unit of work."""

    def get_account(self, account_id: str) -> Account | None:
        """Return an account or None."""

    def list_accounts(self) -> list[Account]:
        """Return all accounts ordered by name."""

    def insert_account(self, account: Account) -> None:
        """Persist a new account."""

    def update_account(self, account: Account) -> None:
        """Persist changes to an existing account."""

    def delete_account(self, account_id: str) -> None:
        """Delete an account together with its transactions."""

    def get_category(self, category_id: str) -> Category | None:
        """Return a category or None."""

    def list_categories(self) -> list[Category]:
        """Return all categories ordered by name."""

    def get_payment_category(self, account_id: str) -> Category | None:
        """Return the payment category shadowing a credit account."""

    def insert_category(self, category: Category) -> None:
        """Persist a new category."""

    def delete_category(self, category_id: str) -> None:
        """Delete a category with its allocations.

        Transactions tagged with the category become uncategorized.
        """

    def get_allocation(
        self,
        category_id: str,
        period: str,
    ) -> Allocation | None:
        """Return the allocation for a (category, period) pair."""

    def get_allocation_by_id(self, allocation_id: str) -> Allocation | None:
        """Return an allocation by identifier."""

    def list_allocations(self, period: str | None = None) -> list[Allocation]:
        """Return allocations, optionally limited to one period."""

    def insert_allocation(self, allocation: Allocation) -> None:
        """Persist a new allocation; (category, period) must be unused."""

    def update_allocation(self, allocation: Allocation) -> None:
        """Persist changes to an existing allocation."""

    def delete_allocation(self, allocation_id: str) -> None:
        """Delete an allocation."""

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        """Return a transaction or None."""

    def find_transaction_by_import_token(
        self,
        account_id: str,
        import_token: str,
    ) -> Transaction | None:
        """Return the transaction imported with a token on an account."""

    def list_transactions(self) -> list[Transaction]:
        """Return all transactions ordered by date."""

    def list_account_transactions(self, account_id: str) -> list[Transaction]:
        """Return transactions recorded on an account."""

    def list_category_transactions(
        self,
        category_id: str,
    ) -> list[Transaction]:
        """Return transactions charged to a category."""

    def insert_transaction(self, transaction: Transaction) -> None:
        """Persist a new transaction."""

    def update_transaction(self, transaction: Transaction) -> None:
        """Persist changes to an existing transaction."""

    def delete_transaction(self, transaction_id: str) -> None:
        """Delete a transaction."""


class LedgerStorePort(Protocol):
    """Port exposing units of work over the ledger store."""

    def unit_of_work(self) -> AbstractContextManager[LedgerRepositoryPort]:
        """Open a unit of work.

        Returns:
            AbstractContextManager[LedgerRepositoryPort]: Context manager
            yielding a repository; commits on exit, rolls back on error.
        """


__all__ = ["LedgerRepositoryPort", "LedgerStorePort"]
