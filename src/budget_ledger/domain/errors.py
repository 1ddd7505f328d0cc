"""Caller-visible ledger errors.

Every error raised across the application boundary derives from
``LedgerError`` and carries a stable ``code`` that transports can map to a
status without inspecting messages.
"""


class LedgerError(Exception):
    """Base class for ledger errors."""

    code = "ledger_error"


class NotFoundError(LedgerError):
    """A referenced account, category, allocation or transaction is missing."""

    code = "not_found"

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


class InvalidInputError(LedgerError):
    """Input failed validation before any write happened."""

    code = "invalid_input"


class NotAPaymentCategoryError(LedgerError):
    """Cover-underfunded was invoked on a regular category."""

    code = "not_a_payment_category"

    def __init__(self, category_id: str) -> None:
        super().__init__(f"Category is not a payment category: {category_id}")
        self.category_id = category_id


class NotUnderfundedError(LedgerError):
    """Cover-underfunded was invoked with no shortfall to cover."""

    code = "not_underfunded"

    def __init__(self, category_id: str) -> None:
        super().__init__(
            f"Payment category is not underfunded: {category_id}"
        )
        self.category_id = category_id


class InsufficientFundsError(LedgerError):
    """Ready to Assign cannot cover the requested shortfall."""

    code = "insufficient_funds"

    def __init__(self, ready_to_assign: int, shortfall: int) -> None:
        super().__init__(
            "Insufficient funds in Ready to Assign: "
            f"available={ready_to_assign}, needed={shortfall}"
        )
        self.ready_to_assign = ready_to_assign
        self.shortfall = shortfall


class InternalError(LedgerError):
    """Store or connectivity failure; details are only logged server-side."""

    code = "internal"


__all__ = [
    "LedgerError",
    "NotFoundError",
    "InvalidInputError",
    "NotAPaymentCategoryError",
    "NotUnderfundedError",
    "InsufficientFundsError",
    "InternalError",
]
