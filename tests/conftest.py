"""Shared fixtures for the ledger tests."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from budget_ledger.application.use_cases import (
    CreateAccountUseCase,
    CreateCategoryUseCase,
    CreateTransactionUseCase,
    SetAllocationUseCase,
)
from budget_ledger.domain.constants import AccountType
from budget_ledger.infrastructure.memory_store import InMemoryLedgerStore


class LedgerFixture:
    """Small facade for arranging ledger state through the use cases."""

    def __init__(self, store, logger) -> None:
        self.store = store
        self.logger = logger
        self.transactions = CreateTransactionUseCase(store, logger=logger)
        self._accounts = CreateAccountUseCase(
            store,
            logger=logger,
            transaction_processor=self.transactions,
        )
        self._categories = CreateCategoryUseCase(store, logger=logger)
        self._allocations = SetAllocationUseCase(store, logger=logger)

    def account(self, name="Checking", account_type=AccountType.CHECKING):
        return self._accounts.execute(name, account_type)

    def credit_card(self, name="Visa"):
        return self._accounts.execute(name, AccountType.CREDIT)

    def category(self, name="Groceries"):
        return self._categories.execute(name)

    def payment_category(self, account_id):
        with self.store.unit_of_work() as ledger:
            return ledger.get_payment_category(account_id)

    def allocate(self, category_id, period, amount):
        return self._allocations.execute(category_id, period, amount)

    def income(self, account_id, amount, txn_date=date(2025, 10, 1)):
        return self.transactions.execute(
            account_id=account_id,
            amount=amount,
            description="Salary",
            txn_date=txn_date,
        )

    def spend(self, account_id, category_id, amount, txn_date=date(2025, 10, 5)):
        return self.transactions.execute(
            account_id=account_id,
            amount=-amount,
            description="Purchase",
            txn_date=txn_date,
            category_id=category_id,
        )

    def get_allocation(self, category_id, period):
        with self.store.unit_of_work() as ledger:
            return ledger.get_allocation(category_id, period)

    def get_account(self, account_id):
        with self.store.unit_of_work() as ledger:
            return ledger.get_account(account_id)


@pytest.fixture
def logger():
    """Logger double used by the use cases."""
    return MagicMock()


@pytest.fixture
def store():
    """Fresh in-memory ledger store."""
    return InMemoryLedgerStore()


@pytest.fixture
def budget(store, logger):
    """Ledger facade over the in-memory store."""
    return LedgerFixture(store, logger)
