"""Tests for the CalculateReadyToAssignUseCase."""

from datetime import date

import pytest

from budget_ledger.application.use_cases import CalculateReadyToAssignUseCase
from budget_ledger.domain.errors import InvalidInputError


def test_ready_to_assign_looks_back_without_limit(budget, store, logger):
    """Older income and allocations keep counting in later periods."""
    checking = budget.account()
    groceries = budget.category("Groceries")
    budget.income(checking.id, 300000, txn_date=date(2024, 1, 15))
    budget.income(checking.id, 200000, txn_date=date(2025, 11, 1))
    budget.allocate(groceries.id, "2024-02", 100000)

    use_case = CalculateReadyToAssignUseCase(store, logger=logger)

    assert use_case.execute("2025-10") == 200000
    assert use_case.execute("2025-11") == 400000
    logger.warning.assert_not_called()


def test_negative_ready_to_assign_logs_warning(budget, store, logger):
    """Over-assigning is reported as a negative amount."""
    groceries = budget.category("Groceries")
    budget.allocate(groceries.id, "2025-10", 7500)

    result = CalculateReadyToAssignUseCase(store, logger=logger).execute(
        "2025-10"
    )

    assert result == -7500
    logger.warning.assert_called_once()


def test_ready_to_assign_rejects_malformed_period(store, logger):
    """Malformed periods are invalid input."""
    with pytest.raises(InvalidInputError):
        CalculateReadyToAssignUseCase(store, logger=logger).execute("10-2025")
