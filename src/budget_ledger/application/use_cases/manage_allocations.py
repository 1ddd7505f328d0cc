"""Use cases and helpers for writing allocations.

At most one allocation exists per (category, period) pair: every write here
is an upsert keyed on that pair.
"""

from dataclasses import replace

from budget_ledger.application.ports.ledger_store import (
    LedgerRepositoryPort,
    LedgerStorePort,
)
from budget_ledger.domain.errors import InvalidInputError, NotFoundError
from budget_ledger.domain.models import Allocation
from budget_ledger.domain.policies import (
    new_identifier,
    validate_identifier,
    validate_period,
)
from budget_ledger.infrastructure.logging.logger import get_app_logger


def increment_allocation(
    ledger: LedgerRepositoryPort,
    category_id: str,
    period: str,
    amount: int,
    moved: bool = False,
    notes: str = "",
) -> Allocation:
    """Add ``amount`` to a category's allocation, creating it if needed.

    Args:
        ledger: Repository bound to the current unit of work.
        category_id: Category receiving the money.
        period: Period of the allocation.
        amount: Positive amount to add.
        moved: Whether the money comes from real-time fund movement.
        notes: Notes for a newly created allocation.

    Returns:
        Allocation: The stored allocation after the increment.
    """
    moved_amount = amount if moved else 0
    existing = ledger.get_allocation(category_id, period)
    if existing is None:
        allocation = Allocation(
            id=new_identifier(),
            category_id=category_id,
            period=period,
            amount=amount,
            notes=notes,
            moved_amount=moved_amount,
        )
        ledger.insert_allocation(allocation)
        return allocation

    allocation = replace(
        existing,
        amount=existing.amount + amount,
        moved_amount=existing.moved_amount + moved_amount,
    )
    ledger.update_allocation(allocation)
    return allocation


class SetAllocationUseCase:
    """Assign an amount to a category for one period, replacing any prior."""

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
        category_id: str,
        period: str,
        amount: int,
        notes: str = "",
    ) -> Allocation:
        """Upsert the allocation of a (category, period) pair.

        Args:
            category_id: Category receiving the money.
            period: Period key ``YYYY-MM``.
            amount: New non-negative amount in minor units.
            notes: Freeform notes.

        Returns:
            Allocation: The stored allocation.

        Raises:
            InvalidInputError: On malformed input or negative amounts.
            NotFoundError: If the category does not exist.
        """
        validate_identifier(category_id, "category_id")
        validate_period(period)
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise InvalidInputError("Allocation amount must be an integer")
        if amount < 0:
            raise InvalidInputError("Allocation amount must be non-negative")

        with self._store.unit_of_work() as ledger:
            if ledger.get_category(category_id) is None:
                raise NotFoundError("Category", category_id)
            existing = ledger.get_allocation(category_id, period)
            if existing is None:
                allocation = Allocation(
                    id=new_identifier(),
                    category_id=category_id,
                    period=period,
                    amount=amount,
                    notes=notes,
                )
                ledger.insert_allocation(allocation)
            else:
                allocation = replace(
                    existing,
                    amount=amount,
                    notes=notes,
                    moved_amount=min(existing.moved_amount, amount),
                )
                ledger.update_allocation(allocation)

        self._logger.info(
            f"Allocated {amount} to category={category_id} for {period}"
        )
        return allocation


class DeleteAllocationUseCase:
    """Delete an allocation by identifier."""

    def __init__(self, store: LedgerStorePort, logger=None) -> None:
        self._store = store
        self._logger = logger or get_app_logger()

    def execute(self, allocation_id: str) -> None:
        validate_identifier(allocation_id, "allocation_id")
        with self._store.unit_of_work() as ledger:
            if ledger.get_allocation_by_id(allocation_id) is None:
                raise NotFoundError("Allocation", allocation_id)
            ledger.delete_allocation(allocation_id)
        self._logger.info(f"Deleted allocation {allocation_id}")


class ListAllocationsUseCase:
    """List allocations, optionally for a single period."""

    def __init__(self, store: LedgerStorePort) -> None:
        self._store = store

    def execute(self, period: str | None = None) -> list[Allocation]:
        if period is not None:
            validate_period(period)
        with self._store.unit_of_work() as ledger:
            return ledger.list_allocations(period)


__all__ = [
    "increment_allocation",
    "SetAllocationUseCase",
    "DeleteAllocationUseCase",
    "ListAllocationsUseCase",
]
