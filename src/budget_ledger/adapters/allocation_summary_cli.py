"""CLI adapter printing the per-category allocation summary of a period."""

import os

from budget_ledger.adapters.period_args import parse_period
from budget_ledger.domain.errors import LedgerError
from budget_ledger.infrastructure.container import (
    build_allocation_summary_use_case,
)
from budget_ledger.infrastructure.logging.logger import get_app_logger
from budget_ledger.utils.money import format_cents


def _format_row(summary) -> str:
    allocated = summary.allocation.amount if summary.allocation else 0
    line = (
        f"{summary.category.name}: allocated={format_cents(allocated)}, "
        f"activity={format_cents(summary.activity)}, "
        f"available={format_cents(summary.available)}"
    )
    if summary.underfunded:
        names = ", ".join(summary.underfunded_categories)
        line += f", underfunded={format_cents(summary.underfunded)}"
        if names:
            line += f" ({names})"
    return line


def main() -> None:
    """Print the allocation summary for ``BUDGET_PERIOD``."""
    logger = get_app_logger()
    period = parse_period(os.getenv("BUDGET_PERIOD"), logger)
    if period is None:
        print("A valid BUDGET_PERIOD (YYYY-MM) is required.")
        return

    use_case = build_allocation_summary_use_case()
    try:
        summaries = use_case.execute(period)
    except LedgerError as exc:
        print(f"Error [{exc.code}]: {exc}")
        return

    print(f"Allocation summary for {period}")
    for summary in summaries:
        print(_format_row(summary))


if __name__ == "__main__":  # pragma: no cover
    main()
