"""Use case building the per-category budget summary for a period."""

from budget_ledger.application.ports.ledger_store import LedgerStorePort
from budget_ledger.application.use_cases.ledger_snapshot import LedgerSnapshot
from budget_ledger.domain.models import AllocationSummary
from budget_ledger.domain.policies import validate_period
from budget_ledger.infrastructure.logging.logger import get_app_logger


class GetAllocationSummaryUseCase:
    """Combine allocation, activity, available and underfunded per category."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing units of work over the ledger store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, period: str) -> list[AllocationSummary]:
        """Return one summary line per category.

        Args:
            period: Period key ``YYYY-MM``.

        Returns:
            list[AllocationSummary]: Lines ordered by category name.
        """
        validate_period(period)
        with self._store.unit_of_work() as ledger:
            snapshot = LedgerSnapshot.load(ledger)

        summaries = []
        for category in snapshot.categories:
            balance = snapshot.category_balance(category.id, period)
            status = snapshot.underfunded(category, period)
            underfunded = None
            underfunded_categories: list[str] = []
            if status is not None and status.is_underfunded:
                underfunded = status.underfunded
                underfunded_categories = status.underfunded_categories
            summaries.append(
                AllocationSummary(
                    category=category,
                    allocation=snapshot.allocation_for(category.id, period),
                    activity=balance.activity,
                    available=balance.available,
                    underfunded=underfunded,
                    underfunded_categories=underfunded_categories,
                )
            )

        underfunded_count = sum(1 for row in summaries if row.underfunded)
        if underfunded_count:
            self._logger.warning(
                f"{underfunded_count} payment categories underfunded "
                f"for {period}"
            )
        return summaries


__all__ = ["GetAllocationSummaryUseCase"]
