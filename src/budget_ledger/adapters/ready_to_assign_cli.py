"""CLI adapter printing the Ready to Assign amount of a period."""

import os

from budget_ledger.adapters.period_args import parse_period
from budget_ledger.domain.errors import LedgerError
from budget_ledger.infrastructure.container import (
    build_ready_to_assign_use_case,
)
from budget_ledger.infrastructure.logging.logger import get_app_logger
from budget_ledger.utils.money import format_cents


def main() -> None:
    """Compute Ready to Assign for ``BUDGET_PERIOD``."""
    logger = get_app_logger()
    period = parse_period(os.getenv("BUDGET_PERIOD"), logger)
    if period is None:
        print("A valid BUDGET_PERIOD (YYYY-MM) is required.")
        return

    use_case = build_ready_to_assign_use_case()
    try:
        amount = use_case.execute(period)
    except LedgerError as exc:
        print(f"Error [{exc.code}]: {exc}")
        return

    print(f"Ready to Assign for {period}: {format_cents(amount)}")


if __name__ == "__main__":  # pragma: no cover
    main()
