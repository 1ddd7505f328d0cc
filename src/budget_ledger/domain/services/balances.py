"""Category balance computation.

Balances are recomputed from the full allocation and transaction history on
every read. Nothing is reset at period boundaries, so unspent money rolls
over by construction.
"""

from collections.abc import Iterable

from budget_ledger.domain.models import Allocation, CategoryBalance, Transaction


def sum_allocated(
    category_id: str,
    allocations: Iterable[Allocation],
) -> int:
    """Return the total allocated to a category across all periods."""
    return sum(
        allocation.amount
        for allocation in allocations
        if allocation.category_id == category_id
    )


def compute_category_balance(
    category_id: str,
    period: str,
    allocations: Iterable[Allocation],
    transactions: Iterable[Transaction],
) -> CategoryBalance:
    """Compute the balance of one category.

    Transfers charged to the category count as spending here, unlike in the
    Ready to Assign computation.

    Args:
        category_id: Category to compute.
        period: Period used for the display-only activity figure.
        allocations: Allocation history; other categories are ignored.
        transactions: Transaction history; other categories are ignored.

    Returns:
        CategoryBalance: Totals, activity and available balance.
    """
    total_spent = 0
    activity = 0
    for txn in transactions:
        if txn.category_id != category_id:
            continue
        if txn.amount < 0:
            total_spent += -txn.amount
        if txn.period == period:
            activity += txn.amount
    return CategoryBalance(
        total_allocated=sum_allocated(category_id, allocations),
        total_spent=total_spent,
        activity=activity,
    )


__all__ = ["sum_allocated", "compute_category_balance"]
