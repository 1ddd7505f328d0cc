"""Domain models for budget categories."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    """Spending purpose, or the payment shadow of a credit account.

    Attributes:
        id: Category identifier.
        name: Display name.
        group_id: Optional category group reference.
        payment_for_account_id: Credit account this category pays off, when
            the category is a payment category.
    """

    id: str
    name: str
    group_id: str | None = None
    payment_for_account_id: str | None = None

    @property
    def is_payment(self) -> bool:
        """Return True when the category shadows a credit account."""
        return bool(self.payment_for_account_id)


__all__ = ["Category"]
