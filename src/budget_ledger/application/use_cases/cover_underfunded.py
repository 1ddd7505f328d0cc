"""Use case covering an underfunded payment category from Ready to Assign.

The operation tops up the payment category allocation by exactly its current
shortfall. It never runs automatically and refuses to overdraw Ready to
Assign. The shortfall is added on top of any existing allocation for the
period.
"""

from budget_ledger.application.ports.ledger_store import LedgerStorePort
from budget_ledger.application.use_cases.ledger_snapshot import LedgerSnapshot
from budget_ledger.application.use_cases.manage_allocations import (
    increment_allocation,
)
from budget_ledger.domain.errors import (
    InsufficientFundsError,
    NotAPaymentCategoryError,
    NotFoundError,
    NotUnderfundedError,
)
from budget_ledger.domain.models import CoverUnderfundedResult
from budget_ledger.domain.policies import validate_identifier, validate_period
from budget_ledger.infrastructure.logging.logger import get_app_logger

COVER_NOTES = "Covered underfunded credit card spending"


class CoverUnderfundedUseCase:
    """Allocate Ready to Assign money to an underfunded payment category."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing units of work over the ledger store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        payment_category_id: str,
        period: str,
    ) -> CoverUnderfundedResult:
        """Cover the shortfall of a payment category for ``period``.

        Args:
            payment_category_id: Payment category to top up.
            period: Period key ``YYYY-MM`` receiving the allocation.

        Returns:
            CoverUnderfundedResult: Stored allocation, covered amount and
            Ready to Assign after the allocation.

        Raises:
            NotFoundError: If the category does not exist.
            NotAPaymentCategoryError: If the category is a regular one.
            NotUnderfundedError: If there is no shortfall.
            InsufficientFundsError: If Ready to Assign is below the shortfall.
        """
        validate_identifier(payment_category_id, "payment_category_id")
        validate_period(period)

        with self._store.unit_of_work() as ledger:
            category = ledger.get_category(payment_category_id)
            if category is None:
                raise NotFoundError("Category", payment_category_id)
            if not category.is_payment:
                self._logger.warning(
                    f"Cover refused, not a payment category: {category.id}"
                )
                raise NotAPaymentCategoryError(category.id)

            snapshot = LedgerSnapshot.load(ledger)
            status = snapshot.underfunded(category, period)
            if status is None or not status.is_underfunded:
                self._logger.warning(
                    f"Cover refused, category not underfunded: {category.id}"
                )
                raise NotUnderfundedError(category.id)

            shortfall = status.underfunded
            ready_to_assign = snapshot.ready_to_assign(period)
            if ready_to_assign < shortfall:
                self._logger.warning(
                    f"Cover refused for {category.id}: "
                    f"ready_to_assign={ready_to_assign}, shortfall={shortfall}"
                )
                raise InsufficientFundsError(ready_to_assign, shortfall)

            allocation = increment_allocation(
                ledger,
                category.id,
                period,
                shortfall,
                notes=COVER_NOTES,
            )
            ready_to_assign_after = LedgerSnapshot.load(ledger).ready_to_assign(
                period
            )

        self._logger.info(
            f"Covered {shortfall} for payment category={category.id} "
            f"in {period}; ready_to_assign={ready_to_assign_after}"
        )
        return CoverUnderfundedResult(
            allocation=allocation,
            covered_amount=shortfall,
            ready_to_assign_after=ready_to_assign_after,
        )


__all__ = ["CoverUnderfundedUseCase", "COVER_NOTES"]
