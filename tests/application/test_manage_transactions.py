"""Tests for transaction update and delete use cases."""

from datetime import date

import pytest

from budget_ledger.application.use_cases import (
    DeleteTransactionUseCase,
    UpdateTransactionUseCase,
)
from budget_ledger.domain.errors import InvalidInputError, NotFoundError
from budget_ledger.domain.policies import new_identifier


def test_update_amount_rebalances_account(budget, store, logger):
    """Changing the amount applies only the difference."""
    checking = budget.account()
    groceries = budget.category("Groceries")
    txn = budget.spend(checking.id, groceries.id, 3000)

    updated = UpdateTransactionUseCase(store, logger=logger).execute(
        txn.id,
        amount=-4500,
        description="Weekly shop",
    )

    assert updated.amount == -4500
    assert updated.description == "Weekly shop"
    assert updated.category_id == groceries.id
    assert budget.get_account(checking.id).balance == -4500


def test_update_does_not_replay_fund_movement(budget, store, logger):
    """Editing a card charge leaves moved funds untouched."""
    card = budget.credit_card()
    groceries = budget.category("Groceries")
    payment = budget.payment_category(card.id)
    budget.allocate(groceries.id, "2025-10", 30000)
    txn = budget.spend(card.id, groceries.id, 10000)

    UpdateTransactionUseCase(store, logger=logger).execute(
        txn.id,
        amount=-25000,
    )

    assert budget.get_allocation(payment.id, "2025-10").amount == 10000
    assert budget.get_account(card.id).balance == -25000


def test_update_moves_transaction_between_accounts(budget, store, logger):
    """Moving a transaction reverses it on the old account."""
    checking = budget.account("Checking")
    savings = budget.account("Savings")
    txn = budget.income(checking.id, 9000)

    UpdateTransactionUseCase(store, logger=logger).execute(
        txn.id,
        account_id=savings.id,
        txn_date=date(2025, 11, 2),
    )

    assert budget.get_account(checking.id).balance == 0
    assert budget.get_account(savings.id).balance == 9000
    with store.unit_of_work() as ledger:
        assert ledger.get_transaction(txn.id).period == "2025-11"


def test_update_rejects_uncategorized_expense(budget, store, logger):
    """Clearing the category of an outflow is invalid."""
    checking = budget.account()
    groceries = budget.category("Groceries")
    txn = budget.spend(checking.id, groceries.id, 3000)

    with pytest.raises(InvalidInputError):
        UpdateTransactionUseCase(store, logger=logger).execute(
            txn.id,
            clear_category=True,
        )

    assert budget.get_account(checking.id).balance == -3000


def test_update_unknown_references_are_not_found(budget, store, logger):
    """Unknown transactions, categories and accounts raise NotFound."""
    checking = budget.account()
    txn = budget.income(checking.id, 100)
    use_case = UpdateTransactionUseCase(store, logger=logger)

    with pytest.raises(NotFoundError):
        use_case.execute(new_identifier(), amount=5)
    with pytest.raises(NotFoundError):
        use_case.execute(txn.id, category_id=new_identifier())
    with pytest.raises(NotFoundError):
        use_case.execute(txn.id, account_id=new_identifier())
    with pytest.raises(InvalidInputError):
        use_case.execute(txn.id, amount=0)


def test_delete_transaction_reverses_balance(budget, store, logger):
    """Deleting a transaction restores the account balance."""
    checking = budget.account()
    txn = budget.income(checking.id, 7000)

    DeleteTransactionUseCase(store, logger=logger).execute(txn.id)

    assert budget.get_account(checking.id).balance == 0
    with store.unit_of_work() as ledger:
        assert ledger.get_transaction(txn.id) is None
    with pytest.raises(NotFoundError):
        DeleteTransactionUseCase(store, logger=logger).execute(txn.id)
