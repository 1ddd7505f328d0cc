"""Tests for account and category use cases."""

from datetime import date

import pytest

from budget_ledger.application.use_cases import (
    CalculateReadyToAssignUseCase,
    CreateAccountUseCase,
    CreateCategoryUseCase,
    DeleteAccountUseCase,
)
from budget_ledger.domain.constants import (
    STARTING_BALANCE_DESCRIPTION,
    AccountType,
)
from budget_ledger.domain.errors import InvalidInputError, NotFoundError
from budget_ledger.domain.policies import new_identifier


def test_credit_account_gets_payment_category(store, logger):
    """Credit accounts are shadowed by a payment category."""
    account = CreateAccountUseCase(store, logger=logger).execute(
        "Visa",
        "credit",
    )

    with store.unit_of_work() as ledger:
        payment = ledger.get_payment_category(account.id)
    assert account.account_type is AccountType.CREDIT
    assert payment.name == "Visa Payment"
    assert payment.is_payment


def test_positive_opening_balance_is_recorded_as_income(store, logger):
    """A starting balance on a debit account counts as income."""
    account = CreateAccountUseCase(store, logger=logger).execute(
        "Checking",
        AccountType.CHECKING,
        opening_balance=150000,
        opened_on=date(2025, 10, 1),
    )

    with store.unit_of_work() as ledger:
        transactions = ledger.list_account_transactions(account.id)
    assert account.balance == 150000
    assert [t.description for t in transactions] == [
        STARTING_BALANCE_DESCRIPTION
    ]
    ready = CalculateReadyToAssignUseCase(store, logger=logger)
    assert ready.execute("2025-10") == 150000


def test_card_opening_debt_is_stored_directly(store, logger):
    """Existing card debt is not income and has no transaction."""
    account = CreateAccountUseCase(store, logger=logger).execute(
        "Visa",
        AccountType.CREDIT,
        opening_balance=-40000,
    )

    with store.unit_of_work() as ledger:
        assert ledger.list_account_transactions(account.id) == []
    assert account.balance == -40000
    assert account.debt_owed == 40000


@pytest.mark.parametrize(
    "name, account_type, opening_balance",
    [("", "checking", 0), ("Cash", "brokerage", 0), ("Cash", "cash", 1.5)],
)
def test_create_account_rejects_invalid_input(
    store,
    logger,
    name,
    account_type,
    opening_balance,
):
    """Names, types and opening balances are validated."""
    with pytest.raises(InvalidInputError):
        CreateAccountUseCase(store, logger=logger).execute(
            name,
            account_type,
            opening_balance=opening_balance,
        )


def test_delete_account_removes_dependents(budget, store, logger):
    """Deleting a card drops its transactions and payment category."""
    card = budget.credit_card()
    groceries = budget.category("Groceries")
    budget.allocate(groceries.id, "2025-10", 10000)
    budget.spend(card.id, groceries.id, 5000)
    payment = budget.payment_category(card.id)

    DeleteAccountUseCase(store, logger=logger).execute(card.id)

    with store.unit_of_work() as ledger:
        assert ledger.get_account(card.id) is None
        assert ledger.get_category(payment.id) is None
        assert ledger.list_transactions() == []
        assert ledger.get_allocation(payment.id, "2025-10") is None
        assert ledger.get_category(groceries.id) is not None


def test_delete_unknown_account_is_not_found(store, logger):
    """Unknown accounts raise NotFoundError."""
    with pytest.raises(NotFoundError):
        DeleteAccountUseCase(store, logger=logger).execute(new_identifier())


def test_create_category_strips_and_requires_name(store, logger):
    """Category names are trimmed and must not be blank."""
    use_case = CreateCategoryUseCase(store, logger=logger)

    category = use_case.execute("  Fuel ")

    assert category.name == "Fuel"
    assert not category.is_payment
    with pytest.raises(InvalidInputError):
        use_case.execute("   ")
