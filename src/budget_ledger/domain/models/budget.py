"""Domain models for computed budget figures."""

from dataclasses import dataclass, field

from budget_ledger.domain.models.allocations import Allocation
from budget_ledger.domain.models.categories import Category


@dataclass(frozen=True)
class CategoryBalance:
    """Balance of a category, rollover included.

    Attributes:
        total_allocated: Sum of allocations across all periods.
        total_spent: Sum of absolute outflows across all periods.
        activity: Signed sum of transactions within the requested period.
    """

    total_allocated: int
    total_spent: int
    activity: int

    @property
    def available(self) -> int:
        """Return allocated minus spent; negative when overspent."""
        return self.total_allocated - self.total_spent


@dataclass(frozen=True)
class UnderfundedStatus:
    """Shortfall of a payment category against its credit account debt.

    Attributes:
        debt_owed: Positive amount owed on the credit account.
        available: Payment category available balance.
        category_spending: Spending per expense category on the account.
        contributions: Portion of each category's spending that its own
            allocations can cover.
        underfunded: Amount still needed; 0 when covered.
        underfunded_categories: Names of the under-allocated categories.
    """

    debt_owed: int
    available: int
    category_spending: dict[str, int] = field(default_factory=dict)
    contributions: dict[str, int] = field(default_factory=dict)
    underfunded: int = 0
    underfunded_categories: list[str] = field(default_factory=list)

    @property
    def total_spending(self) -> int:
        """Return tracked spending across all expense categories."""
        return sum(self.category_spending.values())

    @property
    def total_budgeted(self) -> int:
        """Return spending that expense-category allocations back."""
        return sum(self.contributions.values())

    @property
    def unbudgeted_debt(self) -> int:
        """Return spending never backed by any expense allocation."""
        return self.total_spending - self.total_budgeted

    @property
    def is_underfunded(self) -> bool:
        """Return True when there is a shortfall to cover."""
        return self.underfunded > 0


@dataclass(frozen=True)
class AllocationSummary:
    """Per-category line of the budget screen for one period."""

    category: Category
    allocation: Allocation | None
    activity: int
    available: int
    underfunded: int | None = None
    underfunded_categories: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class CoverUnderfundedResult:
    """Outcome of covering a payment category shortfall."""

    allocation: Allocation
    covered_amount: int
    ready_to_assign_after: int


__all__ = [
    "CategoryBalance",
    "UnderfundedStatus",
    "AllocationSummary",
    "CoverUnderfundedResult",
]
