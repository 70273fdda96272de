"""
Port (interface) for stock data providers.
Infrastructure adapters (e.g. TiingoStockDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.stock_price import PricePoint, QuoteSnapshot


class IStockDataProvider(ABC):
    @abstractmethod
    def get_daily_prices(
        self,
        symbol: str,
        start_date: Optional[str] = None,
        resample_freq: Optional[str] = None,
    ) -> list[PricePoint]:
        """Return the daily price series for *symbol* in upstream order.

        Raises:
            ConfigurationError:       if the provider has no API key.
            NotFoundError:            if the provider does not know *symbol*.
            UpstreamUnavailableError: on network failure or a bad upstream response.
            UpstreamTimeoutError:     if the provider does not answer in time.
        """
        ...

    @abstractmethod
    def get_latest_quotes(self, symbol: str) -> list[QuoteSnapshot]:
        """Return the latest quote snapshots for *symbol* (empty if none).

        Raises the same exceptions as get_daily_prices().
        """
        ...
