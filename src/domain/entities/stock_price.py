"""
Domain entities for stock price data.
Zero external dependencies: pure Python dataclasses only.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PricePoint:
    date: str
    close: float


@dataclass(frozen=True)
class QuoteSnapshot:
    """Latest quote for a ticker.

    ``last`` is only present while the market is open; outside trading hours
    the previous session's close is the best available price.
    """

    ticker: str
    last: Optional[float]
    previous_close: float

    @property
    def is_live(self) -> bool:
        return self.last is not None

    @property
    def current_price(self) -> float:
        return self.last if self.last is not None else self.previous_close
