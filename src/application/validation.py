"""
Query parameter validation shared by the use cases.
Depends only on the domain error taxonomy.
"""

import math
import re
from typing import Optional

from src.domain.entities.price_alert import AlertDirection
from src.domain.errors import InvalidRequestError


def require_params(**params: Optional[str]) -> None:
    """Raise InvalidRequestError naming every blank or absent parameter.

    Keyword names are the public query parameter names (e.g. ``startDate``)
    so the error message matches what the caller sent.
    """
    missing = [name for name, value in params.items() if value is None or not value.strip()]
    if missing:
        raise InvalidRequestError(f"Missing required parameters: {', '.join(missing)}")


# Letters and digits, plus the class separators Tiingo uses (BRK-B, BF.B, BRK_B).
TICKER_PATTERN = re.compile(r"[A-Z0-9][A-Z0-9.\-_]{0,19}")


def normalize_ticker(ticker: str) -> str:
    symbol = ticker.strip().upper()
    if not TICKER_PATTERN.fullmatch(symbol):
        raise InvalidRequestError(f"Invalid ticker: {ticker!r}")
    return symbol


def parse_price(raw: str) -> float:
    try:
        price = float(raw.strip())
    except ValueError:
        raise InvalidRequestError(f"Invalid price format: {raw}") from None
    if not math.isfinite(price):
        raise InvalidRequestError(f"Invalid price format: {raw}")
    return price


def parse_direction(raw: str) -> AlertDirection:
    try:
        return AlertDirection(raw.strip().lower())
    except ValueError:
        raise InvalidRequestError(
            f"Invalid direction: {raw!r}. Expected 'above' or 'below'."
        ) from None
