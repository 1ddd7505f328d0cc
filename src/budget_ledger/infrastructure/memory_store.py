"""In-memory ledger store.

Records live in plain dictionaries. Units of work run one at a time under a
store-wide lock; each snapshots the state on entry and restores it when the
body raises, giving the same all-or-nothing behaviour as the database-backed
store.
"""

from contextlib import contextmanager
from copy import copy
from dataclasses import replace
import threading
from typing import Iterator

from budget_ledger.application.ports.ledger_store import (
    LedgerRepositoryPort,
    LedgerStorePort,
)
from budget_ledger.domain.errors import InternalError
from budget_ledger.domain.models import (
    Account,
    Allocation,
    Category,
    Transaction,
)


class _LedgerTables:
    def __init__(self) -> None:
        self.accounts: dict[str, Account] = {}
        self.categories: dict[str, Category] = {}
        self.allocations: dict[str, Allocation] = {}
        self.transactions: dict[str, Transaction] = {}

    def snapshot(self) -> "_LedgerTables":
        clone = _LedgerTables()
        clone.accounts = copy(self.accounts)
        clone.categories = copy(self.categories)
        clone.allocations = copy(self.allocations)
        clone.transactions = copy(self.transactions)
        return clone

    def restore(self, snapshot: "_LedgerTables") -> None:
        self.accounts = snapshot.accounts
        self.categories = snapshot.categories
        self.allocations = snapshot.allocations
        self.transactions = snapshot.transactions


class InMemoryLedgerRepository(LedgerRepositoryPort):
    """Ledger records kept in process memory."""

    def __init__(self, tables: _LedgerTables) -> None:
        self._tables = tables

    def get_account(self, account_id: str) -> Account | None:
        return self._tables.accounts.get(account_id)

    def list_accounts(self) -> list[Account]:
        return sorted(
            self._tables.accounts.values(),
            key=lambda account: (account.name, account.id),
        )

    def insert_account(self, account: Account) -> None:
        if account.id in self._tables.accounts:
            raise InternalError(f"Duplicate account id: {account.id}")
        self._tables.accounts[account.id] = account

    def update_account(self, account: Account) -> None:
        self._tables.accounts[account.id] = account

    def delete_account(self, account_id: str) -> None:
        transactions = self._tables.transactions
        for transaction in list(transactions.values()):
            if transaction.account_id == account_id:
                del transactions[transaction.id]
            elif transaction.transfer_account_id == account_id:
                transactions[transaction.id] = replace(
                    transaction,
                    transfer_account_id=None,
                )
        for category in list(self._tables.categories.values()):
            if category.payment_for_account_id == account_id:
                self._tables.categories[category.id] = replace(
                    category,
                    payment_for_account_id=None,
                )
        self._tables.accounts.pop(account_id, None)

    def get_category(self, category_id: str) -> Category | None:
        return self._tables.categories.get(category_id)

    def list_categories(self) -> list[Category]:
        return sorted(
            self._tables.categories.values(),
            key=lambda category: (category.name, category.id),
        )

    def get_payment_category(self, account_id: str) -> Category | None:
        for category in self._tables.categories.values():
            if category.payment_for_account_id == account_id:
                return category
        return None

    def insert_category(self, category: Category) -> None:
        if category.id in self._tables.categories:
            raise InternalError(f"Duplicate category id: {category.id}")
        self._tables.categories[category.id] = category

    def delete_category(self, category_id: str) -> None:
        allocations = self._tables.allocations
        for allocation in list(allocations.values()):
            if allocation.category_id == category_id:
                del allocations[allocation.id]
        transactions = self._tables.transactions
        for transaction in list(transactions.values()):
            if transaction.category_id == category_id:
                transactions[transaction.id] = replace(
                    transaction,
                    category_id=None,
                )
        self._tables.categories.pop(category_id, None)

    def get_allocation(
        self,
        category_id: str,
        period: str,
    ) -> Allocation | None:
        for allocation in self._tables.allocations.values():
            if (
                allocation.category_id == category_id
                and allocation.period == period
            ):
                return allocation
        return None

    def get_allocation_by_id(self, allocation_id: str) -> Allocation | None:
        return self._tables.allocations.get(allocation_id)

    def list_allocations(self, period: str | None = None) -> list[Allocation]:
        allocations = [
            allocation
            for allocation in self._tables.allocations.values()
            if period is None or allocation.period == period
        ]
        return sorted(
            allocations,
            key=lambda allocation: (allocation.period, allocation.category_id),
        )

    def insert_allocation(self, allocation: Allocation) -> None:
        if self.get_allocation(allocation.category_id, allocation.period):
            raise InternalError(
                "Duplicate allocation for "
                f"{allocation.category_id} in {allocation.period}"
            )
        self._tables.allocations[allocation.id] = allocation

    def update_allocation(self, allocation: Allocation) -> None:
        self._tables.allocations[allocation.id] = allocation

    def delete_allocation(self, allocation_id: str) -> None:
        self._tables.allocations.pop(allocation_id, None)

    def get_transaction(self, transaction_id: str) -> Transaction | None:
        return self._tables.transactions.get(transaction_id)

    def find_transaction_by_import_token(
        self,
        account_id: str,
        import_token: str,
    ) -> Transaction | None:
        for transaction in self._tables.transactions.values():
            if (
                transaction.account_id == account_id
                and transaction.import_token == import_token
            ):
                return transaction
        return None

    def _sorted_transactions(self, predicate) -> list[Transaction]:
        return sorted(
            (t for t in self._tables.transactions.values() if predicate(t)),
            key=lambda transaction: (transaction.date, transaction.id),
        )

    def list_transactions(self) -> list[Transaction]:
        return self._sorted_transactions(lambda _: True)

    def list_account_transactions(self, account_id: str) -> list[Transaction]:
        return self._sorted_transactions(
            lambda transaction: transaction.account_id == account_id
        )

    def list_category_transactions(
        self,
        category_id: str,
    ) -> list[Transaction]:
        return self._sorted_transactions(
            lambda transaction: transaction.category_id == category_id
        )

    def insert_transaction(self, transaction: Transaction) -> None:
        if transaction.id in self._tables.transactions:
            raise InternalError(f"Duplicate transaction id: {transaction.id}")
        self._tables.transactions[transaction.id] = transaction

    def update_transaction(self, transaction: Transaction) -> None:
        self._tables.transactions[transaction.id] = transaction

    def delete_transaction(self, transaction_id: str) -> None:
        self._tables.transactions.pop(transaction_id, None)


class InMemoryLedgerStore(LedgerStorePort):
    """Ledger store keeping every record in process memory."""

    def __init__(self) -> None:
        self._tables = _LedgerTables()
        self._lock = threading.RLock()

    @contextmanager
    def unit_of_work(self) -> Iterator[LedgerRepositoryPort]:
        """Open a unit of work holding the store lock until it ends.

        A unit opened again from the same thread joins the outer one and is
        undone with it.
        """
        with self._lock:
            snapshot = self._tables.snapshot()
            try:
                yield InMemoryLedgerRepository(self._tables)
            except Exception:
                self._tables.restore(snapshot)
                raise


__all__ = ["InMemoryLedgerRepository", "InMemoryLedgerStore"]
