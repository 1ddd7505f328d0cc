"""Tests for the GetAllocationSummaryUseCase."""

import pytest

from budget_ledger.application.use_cases import GetAllocationSummaryUseCase
from budget_ledger.domain.errors import InvalidInputError


def test_summary_lists_every_category_with_underfunded(budget, store, logger):
    """Payment categories report their shortfall and culprits."""
    checking = budget.account()
    card = budget.credit_card("Visa")
    groceries = budget.category("Groceries")
    budget.category("Rent")
    budget.income(checking.id, 500000)
    budget.allocate(groceries.id, "2025-10", 10000)
    budget.spend(card.id, groceries.id, 20000)

    rows = GetAllocationSummaryUseCase(store, logger=logger).execute("2025-10")

    by_name = {row.category.name: row for row in rows}
    assert [row.category.name for row in rows] == [
        "Groceries",
        "Rent",
        "Visa Payment",
    ]
    assert by_name["Groceries"].allocation.amount == 10000
    assert by_name["Groceries"].activity == -20000
    assert by_name["Groceries"].available == -10000
    assert by_name["Groceries"].underfunded is None
    assert by_name["Rent"].allocation is None
    assert by_name["Rent"].available == 0
    assert by_name["Visa Payment"].available == 10000
    assert by_name["Visa Payment"].underfunded == 10000
    assert by_name["Visa Payment"].underfunded_categories == ["Groceries"]
    logger.warning.assert_called_once()


def test_summary_carries_unspent_money_forward(budget, store, logger):
    """Allocations from earlier periods stay available later."""
    groceries = budget.category("Groceries")
    budget.allocate(groceries.id, "2025-01", 5000)

    rows = GetAllocationSummaryUseCase(store, logger=logger).execute("2025-03")

    assert rows[0].allocation is None
    assert rows[0].available == 5000


def test_summary_rejects_malformed_period(store, logger):
    """Malformed periods are invalid input."""
    with pytest.raises(InvalidInputError):
        GetAllocationSummaryUseCase(store, logger=logger).execute("2025-1")
