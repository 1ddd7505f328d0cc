"""CLI adapter covering an underfunded credit card payment category."""

import os

from budget_ledger.adapters.period_args import parse_period
from budget_ledger.domain.errors import LedgerError
from budget_ledger.infrastructure.container import (
    build_cover_underfunded_use_case,
)
from budget_ledger.infrastructure.logging.logger import get_app_logger
from budget_ledger.utils.money import format_cents


def main() -> None:
    """Cover PAYMENT_CATEGORY_ID for BUDGET_PERIOD from Ready to Assign."""
    logger = get_app_logger()
    category_id = (os.getenv("PAYMENT_CATEGORY_ID") or "").strip()
    if not category_id:
        logger.warning("PAYMENT_CATEGORY_ID is required to cover spending.")
        print("PAYMENT_CATEGORY_ID is required.")
        return
    period = parse_period(os.getenv("BUDGET_PERIOD"), logger)
    if period is None:
        print("A valid BUDGET_PERIOD (YYYY-MM) is required.")
        return

    use_case = build_cover_underfunded_use_case()
    try:
        result = use_case.execute(category_id, period)
    except LedgerError as exc:
        print(f"Error [{exc.code}]: {exc}")
        return

    print(
        f"Covered {format_cents(result.covered_amount)} for {period}; "
        f"allocation is now {format_cents(result.allocation.amount)}, "
        f"Ready to Assign is {format_cents(result.ready_to_assign_after)}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
