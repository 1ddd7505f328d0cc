"""Helpers for minor-unit money values."""

from decimal import Decimal


def coerce_cents(value) -> int:
    """Normalize a stored numeric value to integer minor units.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        int: Amount in minor units.

    Raises:
        ValueError: If the value carries a fractional part.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError(f"Not a money amount: {value!r}")
    if isinstance(value, int):
        return value
    decimal_value = Decimal(str(value))
    if decimal_value != decimal_value.to_integral_value():
        raise ValueError(f"Money amounts must be whole minor units: {value}")
    return int(decimal_value)


def format_cents(value: int) -> str:
    """Render minor units as a signed decimal string, e.g. ``-12.50``."""
    sign = "-" if value < 0 else ""
    whole, cents = divmod(abs(value), 100)
    return f"{sign}{whole}.{cents:02d}"


__all__ = ["coerce_cents", "format_cents"]
