"""
Infrastructure adapter: Tiingo REST API -> IStockDataProvider.
All Tiingo-specific details (URLs, token parameter, JSON field names) are
confined here; the rest of the codebase depends only on IStockDataProvider.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from src.domain.entities.stock_price import PricePoint, QuoteSnapshot
from src.domain.errors import (
    ConfigurationError,
    InvalidRequestError,
    NotFoundError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from src.domain.ports.stock_data_port import IStockDataProvider

logger = logging.getLogger("market_service.stock_data.tiingo")


class TiingoStockDataProvider(IStockDataProvider):
    """Fetches daily prices and IEX quotes from Tiingo over HTTP."""

    DEFAULT_BASE_URL = "https://api.tiingo.com"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 6.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Args:
            api_key:  Tiingo token. May be empty; every call then raises
                      ConfigurationError instead of reaching the network.
            base_url: API root, overridable for tests or a proxy.
            timeout:  Applied to connect, read, write and pool acquisition.
            client:   Optional pre-built httpx.Client (used by tests to plug in
                      a MockTransport). Built from base_url/timeout otherwise.
        """
        self._api_key = api_key
        self._client = client or httpx.Client(
            base_url=base_url,
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def get_daily_prices(
        self,
        symbol: str,
        start_date: Optional[str] = None,
        resample_freq: Optional[str] = None,
    ) -> list[PricePoint]:
        params = {}
        if start_date:
            params["startDate"] = start_date
        if resample_freq:
            params["resampleFreq"] = resample_freq

        payload = self._get(f"/tiingo/daily/{quote(symbol, safe='')}/prices", params, symbol)
        try:
            return [
                PricePoint(date=str(row["date"]), close=float(row["close"]))
                for row in payload
            ]
        except (KeyError, TypeError, ValueError) as exc:
            raise UpstreamUnavailableError(
                f"Malformed price data from Tiingo for {symbol}."
            ) from exc

    def get_latest_quotes(self, symbol: str) -> list[QuoteSnapshot]:
        payload = self._get(f"/iex/{quote(symbol, safe='')}", {}, symbol)
        try:
            return [
                QuoteSnapshot(
                    ticker=str(row.get("ticker") or symbol).upper(),
                    last=float(row["last"]) if row.get("last") is not None else None,
                    previous_close=float(row["prevClose"]),
                )
                for row in payload
            ]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise UpstreamUnavailableError(
                f"Malformed quote data from Tiingo for {symbol}."
            ) from exc

    def _get(self, path: str, params: dict[str, str], symbol: str) -> list[Any]:
        """GET *path* and return the decoded JSON array.

        Translates transport and HTTP failures into domain errors. The token is
        added here so it never appears in the caller's params or in log lines.
        """
        if not self._api_key:
            raise ConfigurationError("Missing API key.")

        logger.debug("GET %s params=%s", path, params)
        try:
            response = self._client.get(path, params={**params, "token": self._api_key})
        except httpx.InvalidURL as exc:
            raise InvalidRequestError(f"Invalid ticker: {symbol!r}") from exc
        except httpx.TimeoutException as exc:
            logger.error("Tiingo request timed out: %s", path)
            raise UpstreamTimeoutError("Network timeout.") from exc
        except httpx.HTTPError as exc:
            logger.error("Tiingo request failed: %s (%s)", path, exc.__class__.__name__)
            raise UpstreamUnavailableError("Network error.") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError(f"No price data found for ticker: {symbol}")
        if response.status_code != httpx.codes.OK:
            logger.error("Tiingo returned HTTP %s for %s", response.status_code, path)
            raise UpstreamUnavailableError(
                f"Upstream provider returned HTTP {response.status_code}."
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamUnavailableError("Upstream provider returned invalid JSON.") from exc
        if not isinstance(payload, list):
            raise UpstreamUnavailableError("Upstream provider returned an unexpected payload.")
        return payload
