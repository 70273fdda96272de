"""
Use-case: decide whether a price alert would already be triggered.
Depends only on Domain ports and entities; no infrastructure imports.
"""

import logging
from typing import Optional

from src.application.validation import (
    normalize_ticker,
    parse_direction,
    parse_price,
    require_params,
)
from src.domain.entities.price_alert import AlertCheckResult, AlertDirection, is_already_triggered
from src.domain.errors import AlertAlreadyTriggeredError, NotFoundError
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger("market_service.use_cases.price_alert")

VALID_ALERT_MESSAGE = "Valid alert."


def evaluate_alert(
    ticker: str, current_price: float, target_price: float, direction: AlertDirection
) -> AlertCheckResult:
    """Pure decision step: no I/O, same inputs always give the same result."""
    if is_already_triggered(current_price, target_price, direction):
        message = (
            f"Current price is ${current_price:.2f}, "
            f"already {direction.value} ${target_price:.2f}"
        )
        valid = False
    else:
        message = VALID_ALERT_MESSAGE
        valid = True
    return AlertCheckResult(
        ticker=ticker,
        target_price=target_price,
        direction=direction,
        current_price=current_price,
        valid=valid,
        message=message,
    )


class CheckPriceAlertUseCase:
    def __init__(self, provider: IStockDataProvider) -> None:
        self._provider = provider

    def execute(
        self,
        ticker: Optional[str],
        price: Optional[str],
        direction: Optional[str],
    ) -> AlertCheckResult:
        """Check an alert for *ticker* at *price* in *direction* against the latest quote.

        Args:
            ticker:    Ticker symbol (case-insensitive).
            price:     Target price as received on the query string.
            direction: 'above' or 'below' (case-insensitive).

        Returns:
            A valid AlertCheckResult.

        Raises:
            InvalidRequestError:        on missing parameters, a non-numeric
                                        price or an unknown direction.
            NotFoundError:              if the provider has no quote.
            AlertAlreadyTriggeredError: if the current price is already past
                                        the target in the requested direction.
            Any exception propagated from IStockDataProvider on API failure.
        """
        require_params(ticker=ticker, price=price, direction=direction)
        target_price = parse_price(price)
        alert_direction = parse_direction(direction)
        symbol = normalize_ticker(ticker)
        logger.info(
            "Checking alert - ticker=%s price=%s direction=%s",
            symbol,
            target_price,
            alert_direction.value,
        )

        quotes = self._provider.get_latest_quotes(symbol)
        if not quotes:
            raise NotFoundError(f"No price data found for ticker: {symbol}")

        quote = quotes[0]
        if not quote.is_live:
            logger.warning("Live price unavailable for %s, using previous close.", symbol)

        result = evaluate_alert(symbol, quote.current_price, target_price, alert_direction)
        if not result.valid:
            raise AlertAlreadyTriggeredError(result.message)

        logger.info(
            "Valid alert - ticker=%s current=%.2f target=%.2f %s",
            symbol,
            result.current_price,
            target_price,
            alert_direction.value,
        )
        return result
