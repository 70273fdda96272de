"""
Use-case: retrieve the historical closing prices for a given symbol.
Depends only on Domain ports and entities; no infrastructure imports.
"""

import logging
from typing import Optional

from src.application.validation import normalize_ticker, require_params
from src.domain.entities.stock_price import PricePoint
from src.domain.errors import NotFoundError
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger("market_service.use_cases.historical_prices")


class GetHistoricalStockPricesUseCase:
    def __init__(self, provider: IStockDataProvider) -> None:
        self._provider = provider

    def execute(
        self,
        ticker: Optional[str],
        start_date: Optional[str],
        interval: Optional[str],
    ) -> list[PricePoint]:
        """Fetch the price series for *ticker* starting at *start_date*.

        Args:
            ticker:     Ticker symbol (case-insensitive).
            start_date: First date of the series; format is validated upstream.
            interval:   Resampling frequency passed through as ``resampleFreq``
                        (e.g. 'daily', 'weekly', 'monthly').

        Returns:
            The price points in the order the provider returned them.

        Raises:
            InvalidRequestError: if any argument is blank.
            NotFoundError:       if the provider returns no points.
            Any exception propagated from IStockDataProvider on API failure.
        """
        require_params(ticker=ticker, startDate=start_date, interval=interval)
        symbol = normalize_ticker(ticker)
        logger.info(
            "Fetching stock data - ticker=%s start_date=%s interval=%s",
            symbol,
            start_date,
            interval,
        )

        points = self._provider.get_daily_prices(
            symbol,
            start_date=start_date.strip(),
            resample_freq=interval.strip(),
        )
        if not points:
            raise NotFoundError(f"No price data found for ticker: {symbol}")

        logger.info("Retrieved %d price points for %s", len(points), symbol)
        return points
