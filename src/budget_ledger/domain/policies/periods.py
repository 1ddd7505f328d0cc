"""Period key policies.

Periods are calendar months keyed as ``YYYY-MM``. The zero-padded form makes
lexicographic order coincide with chronological order, so period keys can be
compared as plain strings.
"""

import re
from datetime import date

from budget_ledger.domain.constants import (
    PERIOD_MAX_FUTURE_YEARS,
    PERIOD_MAX_PAST_YEARS,
)
from budget_ledger.domain.errors import InvalidInputError

PERIOD_PATTERN = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def validate_period(period: str | None) -> str:
    """Return the period unchanged or raise when it is malformed.

    Args:
        period: Candidate period key.

    Returns:
        str: The validated period key.

    Raises:
        InvalidInputError: If the value is not ``YYYY-MM`` with month 01-12.
    """
    if not isinstance(period, str) or not PERIOD_PATTERN.match(period):
        raise InvalidInputError(
            f"Invalid period format {period!r}, expected YYYY-MM"
        )
    return period


def period_of(value: date) -> str:
    """Return the period key containing a date."""
    return f"{value.year:04d}-{value.month:02d}"


def validate_period_range(
    period: str,
    today: date,
    max_past_years: int = PERIOD_MAX_PAST_YEARS,
    max_future_years: int = PERIOD_MAX_FUTURE_YEARS,
) -> str:
    """Reject periods too far from ``today``.

    Args:
        period: Period key to check.
        today: Reference date.
        max_past_years: How many years back a period may start.
        max_future_years: How many years ahead a period may start.

    Returns:
        str: The validated period key.

    Raises:
        InvalidInputError: If the period is malformed or out of range.
    """
    validate_period(period)
    year, month = (int(part) for part in period.split("-"))
    months = year * 12 + month
    current = today.year * 12 + today.month
    if months < current - max_past_years * 12:
        raise InvalidInputError(
            f"Period {period} is more than {max_past_years} years in the past"
        )
    if months > current + max_future_years * 12:
        raise InvalidInputError(
            f"Period {period} is more than {max_future_years} years in the "
            "future"
        )
    return period


__all__ = [
    "PERIOD_PATTERN",
    "validate_period",
    "period_of",
    "validate_period_range",
]
