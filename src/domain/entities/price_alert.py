"""
Domain entities for price alerts.
Zero external dependencies: pure Python only.
"""

from dataclasses import dataclass
from enum import Enum


class AlertDirection(str, Enum):
    ABOVE = "above"
    BELOW = "below"


@dataclass(frozen=True)
class AlertCheckResult:
    ticker: str
    target_price: float
    direction: AlertDirection
    current_price: float
    valid: bool
    message: str


def is_already_triggered(
    current_price: float, target_price: float, direction: AlertDirection
) -> bool:
    """Return True if an alert at *target_price* would fire immediately.

    A price sitting exactly on the target has not crossed it yet.
    """
    if direction is AlertDirection.ABOVE:
        return current_price > target_price
    return current_price < target_price
