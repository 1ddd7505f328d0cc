"""Domain policies package."""

from .identifiers import new_identifier, validate_identifier
from .periods import period_of, validate_period, validate_period_range

__all__ = [
    "new_identifier",
    "validate_identifier",
    "period_of",
    "validate_period",
    "validate_period_range",
]
