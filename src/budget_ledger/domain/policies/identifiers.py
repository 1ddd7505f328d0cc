"""Identifier policies."""

import uuid

from budget_ledger.domain.errors import InvalidInputError


def new_identifier() -> str:
    """Return a fresh random identifier."""
    return str(uuid.uuid4())


def validate_identifier(value: str | None, field: str) -> str:
    """Return the identifier or raise when it is not a UUID.

    Args:
        value: Candidate identifier.
        field: Field name used in the error message.

    Returns:
        str: The identifier unchanged.

    Raises:
        InvalidInputError: If the value does not parse as a UUID.
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"{field} is required")
    try:
        uuid.UUID(value)
    except ValueError as exc:
        raise InvalidInputError(f"{field} is not a valid UUID: {value}") from exc
    return value


__all__ = ["new_identifier", "validate_identifier"]
