"""Domain models for allocations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Allocation:
    """Money assigned to a category for one period.

    Attributes:
        id: Allocation identifier.
        category_id: Category receiving the money.
        period: Period key in ``YYYY-MM`` form.
        amount: Non-negative amount in minor units.
        notes: Freeform notes.
        moved_amount: Portion of ``amount`` that arrived through real-time
            movement from expense categories. Always 0 for regular
            categories and never greater than ``amount``.
    """

    id: str
    category_id: str
    period: str
    amount: int
    notes: str = ""
    moved_amount: int = 0

    @property
    def assigned_amount(self) -> int:
        """Return the part of the amount that was assigned from income."""
        return self.amount - self.moved_amount


__all__ = ["Allocation"]
