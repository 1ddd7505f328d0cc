"""Ready to Assign computation."""

from collections.abc import Iterable

from budget_ledger.domain.models import Allocation, Transaction


def compute_ready_to_assign(
    period: str,
    transactions: Iterable[Transaction],
    allocations: Iterable[Allocation],
) -> int:
    """Return income through ``period`` not yet assigned to a category.

    Both sums look back without limit. Transfers are never income. Funds
    that reached a payment category through real-time movement are skipped,
    since the expense category they came from already counted them. The
    result may be negative when more was assigned than received.

    Args:
        period: Last period included, as ``YYYY-MM``.
        transactions: Full transaction history.
        allocations: Full allocation history.

    Returns:
        int: Signed amount in minor units.
    """
    income = sum(
        txn.amount
        for txn in transactions
        if txn.amount > 0 and not txn.is_transfer and txn.period <= period
    )
    assigned = sum(
        allocation.assigned_amount
        for allocation in allocations
        if allocation.period <= period
    )
    return income - assigned


__all__ = ["compute_ready_to_assign"]
