"""Period argument handling shared by the command-line adapters."""

from datetime import date

from budget_ledger.domain.errors import InvalidInputError
from budget_ledger.domain.policies import period_of, validate_period_range


def parse_period(
    value: str | None,
    logger,
    today: date | None = None,
) -> str | None:
    """Resolve the period requested on the command line.

    Args:
        value: Period in YYYY-MM format; the current month when empty.
        logger: Logger used for warnings.
        today: Reference date for the accepted range.

    Returns:
        str | None: Period key, or None when invalid or out of range.
    """
    reference = today or date.today()
    if not value:
        return period_of(reference)
    try:
        return validate_period_range(value.strip(), reference)
    except InvalidInputError as exc:
        logger.warning(f"Invalid period '{value}': {exc}")
        return None


__all__ = ["parse_period"]
