"""Tests for the CoverUnderfundedUseCase."""

import pytest

from budget_ledger.application.use_cases import (
    CalculateReadyToAssignUseCase,
    CoverUnderfundedUseCase,
    SetAllocationUseCase,
)
from budget_ledger.application.use_cases.cover_underfunded import COVER_NOTES
from budget_ledger.domain.errors import (
    InsufficientFundsError,
    InvalidInputError,
    NotAPaymentCategoryError,
    NotFoundError,
    NotUnderfundedError,
)
from budget_ledger.domain.policies import new_identifier


def _underfunded_card(budget, income):
    """Arrange a 10000 shortfall on the card's payment category."""
    checking = budget.account()
    card = budget.credit_card()
    groceries = budget.category("Groceries")
    budget.income(checking.id, income)
    budget.allocate(groceries.id, "2025-10", 10000)
    budget.spend(card.id, groceries.id, 20000)
    return budget.payment_category(card.id), groceries


def test_cover_adds_shortfall_to_existing_allocation(budget, store, logger):
    """The shortfall is added on top of the moved funds."""
    payment, _ = _underfunded_card(budget, 500000)
    use_case = CoverUnderfundedUseCase(store, logger=logger)

    result = use_case.execute(payment.id, "2025-10")

    assert result.covered_amount == 10000
    assert result.allocation.amount == 20000
    assert result.allocation.moved_amount == 10000
    assert result.ready_to_assign_after == 480000
    stored = budget.get_allocation(payment.id, "2025-10")
    assert stored == result.allocation


def test_cover_creates_allocation_when_missing(budget, store, logger):
    """Unbudgeted spending gets a fresh payment allocation."""
    checking = budget.account()
    card = budget.credit_card()
    fuel = budget.category("Fuel")
    budget.income(checking.id, 100000)
    budget.spend(card.id, fuel.id, 6000)
    payment = budget.payment_category(card.id)

    result = CoverUnderfundedUseCase(store, logger=logger).execute(
        payment.id,
        "2025-10",
    )

    assert result.allocation.amount == 6000
    assert result.allocation.moved_amount == 0
    assert result.allocation.notes == COVER_NOTES


def test_second_cover_fails_with_not_underfunded(budget, store, logger):
    """Covering twice in a row is rejected the second time."""
    payment, _ = _underfunded_card(budget, 500000)
    use_case = CoverUnderfundedUseCase(store, logger=logger)
    use_case.execute(payment.id, "2025-10")

    with pytest.raises(NotUnderfundedError):
        use_case.execute(payment.id, "2025-10")


def test_cover_with_exact_funds_leaves_zero(budget, store, logger):
    """Ready to Assign equal to the shortfall is enough."""
    payment, _ = _underfunded_card(budget, 20000)
    ready = CalculateReadyToAssignUseCase(store, logger=logger)
    assert ready.execute("2025-10") == 10000

    result = CoverUnderfundedUseCase(store, logger=logger).execute(
        payment.id,
        "2025-10",
    )

    assert result.ready_to_assign_after == 0
    assert ready.execute("2025-10") == 0


def test_cover_one_unit_short_fails_without_writing(budget, store, logger):
    """One unit less than the shortfall raises InsufficientFunds."""
    payment, _ = _underfunded_card(budget, 19999)
    before = budget.get_allocation(payment.id, "2025-10")

    with pytest.raises(InsufficientFundsError) as excinfo:
        CoverUnderfundedUseCase(store, logger=logger).execute(
            payment.id,
            "2025-10",
        )

    assert excinfo.value.ready_to_assign == 9999
    assert excinfo.value.shortfall == 10000
    assert excinfo.value.code == "insufficient_funds"
    assert budget.get_allocation(payment.id, "2025-10") == before
    logger.warning.assert_called()


def test_cover_rejects_regular_category(budget, store, logger):
    """Regular categories cannot be covered."""
    _, groceries = _underfunded_card(budget, 500000)

    with pytest.raises(NotAPaymentCategoryError):
        CoverUnderfundedUseCase(store, logger=logger).execute(
            groceries.id,
            "2025-10",
        )


def test_cover_rejects_card_without_debt(budget, store, logger):
    """A payment category with nothing owed is not underfunded."""
    card = budget.credit_card()
    payment = budget.payment_category(card.id)

    with pytest.raises(NotUnderfundedError):
        CoverUnderfundedUseCase(store, logger=logger).execute(
            payment.id,
            "2025-10",
        )


def test_cover_unknown_category_is_not_found(store, logger):
    """Unknown identifiers raise NotFoundError."""
    with pytest.raises(NotFoundError):
        CoverUnderfundedUseCase(store, logger=logger).execute(
            new_identifier(),
            "2025-10",
        )


@pytest.mark.parametrize(
    "category_id, period",
    [("not-a-uuid", "2025-10"), ("bad", "2025-13")],
)
def test_cover_rejects_invalid_input(store, logger, category_id, period):
    """Malformed identifiers and periods are invalid input."""
    with pytest.raises(InvalidInputError):
        CoverUnderfundedUseCase(store, logger=logger).execute(
            category_id,
            period,
        )


def test_raising_payment_allocation_lowers_shortfall(budget, store, logger):
    """Adding X to the payment allocation lowers underfunded by min(X, u)."""
    payment, _ = _underfunded_card(budget, 500000)
    set_allocation = SetAllocationUseCase(store, logger=logger)

    set_allocation.execute(payment.id, "2025-10", 14000)
    result = CoverUnderfundedUseCase(store, logger=logger).execute(
        payment.id,
        "2025-10",
    )

    assert result.covered_amount == 6000
