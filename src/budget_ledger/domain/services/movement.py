"""Real-time fund movement for credit card spending."""

from collections.abc import Iterable

from budget_ledger.domain.models import Allocation, Transaction


def available_before_charge(
    category_id: str,
    period: str,
    allocation: Allocation | None,
    transactions: Iterable[Transaction],
    exclude_transaction_id: str,
) -> int:
    """Return a category's period budget left before a new charge.

    Args:
        category_id: Expense category being charged.
        period: Period of the charge.
        allocation: The category's allocation for ``period``, if any.
        transactions: Transactions charged to the category.
        exclude_transaction_id: The charge itself, left out of activity.

    Returns:
        int: Allocation plus net activity already posted in the period.
    """
    allocated = allocation.amount if allocation is not None else 0
    activity = sum(
        txn.amount
        for txn in transactions
        if txn.category_id == category_id
        and txn.period == period
        and txn.id != exclude_transaction_id
    )
    return allocated + activity


def amount_to_move(available: int, charge: int) -> int:
    """Return how much budget follows a charge to the payment category.

    Args:
        available: Expense category budget before the charge.
        charge: Signed charge amount (negative for spending).

    Returns:
        int: ``min(available, |charge|)`` floored at 0.
    """
    return max(0, min(available, abs(charge)))


__all__ = ["available_before_charge", "amount_to_move"]
