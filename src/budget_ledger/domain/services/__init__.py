"""Domain services package."""

from .balances import compute_category_balance, sum_allocated
from .movement import amount_to_move, available_before_charge
from .ready_to_assign import compute_ready_to_assign
from .underfunded import detect_underfunded

__all__ = [
    "amount_to_move",
    "available_before_charge",
    "compute_category_balance",
    "compute_ready_to_assign",
    "detect_underfunded",
    "sum_allocated",
]
