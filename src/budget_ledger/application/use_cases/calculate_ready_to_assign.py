"""Use case computing Ready to Assign for a period."""

from budget_ledger.application.ports.ledger_store import LedgerStorePort
from budget_ledger.application.use_cases.ledger_snapshot import LedgerSnapshot
from budget_ledger.domain.policies import validate_period
from budget_ledger.infrastructure.logging.logger import get_app_logger


class CalculateReadyToAssignUseCase:
    """Compute income not yet assigned to any category."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Port providing units of work over the ledger store.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, period: str) -> int:
        """Return Ready to Assign through ``period``.

        Args:
            period: Period key ``YYYY-MM``.

        Returns:
            int: Signed amount in minor units; negative when over-assigned.
        """
        validate_period(period)
        with self._store.unit_of_work() as ledger:
            snapshot = LedgerSnapshot.load(ledger)
        ready_to_assign = snapshot.ready_to_assign(period)
        if ready_to_assign < 0:
            self._logger.warning(
                f"Ready to Assign is negative for {period}: {ready_to_assign}"
            )
        return ready_to_assign


__all__ = ["CalculateReadyToAssignUseCase"]
