"""Underfunded detection for payment categories."""

from collections.abc import Iterable, Mapping

from budget_ledger.domain.models import (
    Account,
    Allocation,
    Transaction,
    UnderfundedStatus,
)
from budget_ledger.domain.services.balances import sum_allocated


def detect_underfunded(
    credit_account: Account,
    payment_available: int,
    account_transactions: Iterable[Transaction],
    allocations: Iterable[Allocation],
    category_names: Mapping[str, str],
) -> UnderfundedStatus:
    """Decide whether a payment category can retire its card's debt.

    Spending on the card is grouped per expense category and compared with
    what each category's own allocations can back. Real-time movement
    already placed the backed part inside ``payment_available``, so the
    shortfall is the debt explained by tracked spending minus what the
    payment category holds.

    Args:
        credit_account: Credit account shadowed by the payment category.
        payment_available: Available balance of the payment category.
        account_transactions: Transactions recorded on the credit account.
        allocations: Allocation history for all categories.
        category_names: Category names keyed by identifier.

    Returns:
        UnderfundedStatus: Breakdown, shortfall and responsible categories.
    """
    debt_owed = credit_account.debt_owed
    if debt_owed == 0:
        return UnderfundedStatus(debt_owed=0, available=payment_available)

    category_spending: dict[str, int] = {}
    for txn in account_transactions:
        if txn.amount < 0 and txn.category_id:
            category_spending[txn.category_id] = (
                category_spending.get(txn.category_id, 0) - txn.amount
            )

    allocations = list(allocations)
    contributions = {
        category_id: min(spending, sum_allocated(category_id, allocations))
        for category_id, spending in category_spending.items()
    }

    owed_from_spending = min(debt_owed, sum(category_spending.values()))
    underfunded = max(0, owed_from_spending - payment_available)

    responsible: list[str] = []
    if underfunded > 0:
        responsible = sorted(
            category_names.get(category_id, category_id)
            for category_id, spending in category_spending.items()
            if spending > contributions[category_id]
        )

    return UnderfundedStatus(
        debt_owed=debt_owed,
        available=payment_available,
        category_spending=category_spending,
        contributions=contributions,
        underfunded=underfunded,
        underfunded_categories=responsible,
    )


__all__ = ["detect_underfunded"]
