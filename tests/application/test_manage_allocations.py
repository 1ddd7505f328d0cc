"""Tests for allocation use cases."""

import pytest

from budget_ledger.application.use_cases import (
    DeleteAllocationUseCase,
    ListAllocationsUseCase,
    SetAllocationUseCase,
)
from budget_ledger.application.use_cases.manage_allocations import (
    increment_allocation,
)
from budget_ledger.domain.errors import InvalidInputError, NotFoundError
from budget_ledger.domain.policies import new_identifier


def test_set_allocation_replaces_existing_amount(budget, store, logger):
    """Setting twice keeps one allocation with the latest amount."""
    groceries = budget.category("Groceries")
    use_case = SetAllocationUseCase(store, logger=logger)

    first = use_case.execute(groceries.id, "2025-10", 5000, notes="start")
    second = use_case.execute(groceries.id, "2025-10", 8000)

    assert second.id == first.id
    assert second.amount == 8000
    assert ListAllocationsUseCase(store).execute("2025-10") == [second]


def test_set_allocation_clamps_moved_amount(budget, store, logger):
    """Lowering a payment allocation never leaves more moved than held."""
    card = budget.credit_card()
    groceries = budget.category("Groceries")
    payment = budget.payment_category(card.id)
    budget.allocate(groceries.id, "2025-10", 30000)
    budget.spend(card.id, groceries.id, 20000)

    lowered = SetAllocationUseCase(store, logger=logger).execute(
        payment.id,
        "2025-10",
        5000,
    )

    assert lowered.amount == 5000
    assert lowered.moved_amount == 5000


@pytest.mark.parametrize("amount", [-1, 1.5, None, True])
def test_set_allocation_rejects_invalid_amounts(budget, store, logger, amount):
    """Amounts must be non-negative integers."""
    groceries = budget.category("Groceries")

    with pytest.raises(InvalidInputError):
        SetAllocationUseCase(store, logger=logger).execute(
            groceries.id,
            "2025-10",
            amount,
        )


def test_set_allocation_requires_existing_category(store, logger):
    """Unknown categories raise NotFoundError."""
    with pytest.raises(NotFoundError):
        SetAllocationUseCase(store, logger=logger).execute(
            new_identifier(),
            "2025-10",
            100,
        )


def test_increment_allocation_adds_to_existing(budget, store):
    """Increments create the allocation once and add afterwards."""
    groceries = budget.category("Groceries")

    with store.unit_of_work() as ledger:
        created = increment_allocation(ledger, groceries.id, "2025-10", 300)
        updated = increment_allocation(
            ledger,
            groceries.id,
            "2025-10",
            200,
            moved=True,
        )

    assert updated.id == created.id
    assert updated.amount == 500
    assert updated.moved_amount == 200


def test_delete_allocation_removes_it(budget, store, logger):
    """Deleted allocations disappear from listings."""
    groceries = budget.category("Groceries")
    allocation = budget.allocate(groceries.id, "2025-10", 100)

    DeleteAllocationUseCase(store, logger=logger).execute(allocation.id)

    assert ListAllocationsUseCase(store).execute() == []
    with pytest.raises(NotFoundError):
        DeleteAllocationUseCase(store, logger=logger).execute(allocation.id)


def test_list_allocations_filters_by_period(budget, store):
    """Listing by period only returns that period."""
    groceries = budget.category("Groceries")
    budget.allocate(groceries.id, "2025-09", 100)
    october = budget.allocate(groceries.id, "2025-10", 200)

    assert ListAllocationsUseCase(store).execute("2025-10") == [october]
    assert len(ListAllocationsUseCase(store).execute()) == 2
    with pytest.raises(InvalidInputError):
        ListAllocationsUseCase(store).execute("2025-1")
