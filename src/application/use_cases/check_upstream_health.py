"""
Use-case: confirm the service can reach the market-data provider.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from src.domain.errors import NotFoundError, UpstreamUnavailableError
from src.domain.ports.stock_data_port import IStockDataProvider


class CheckUpstreamHealthUseCase:
    # Always listed, so a failure here means the provider is down, not the symbol.
    REFERENCE_SYMBOL = "SPY"

    def __init__(self, provider: IStockDataProvider) -> None:
        self._provider = provider

    def execute(self) -> bool:
        """Issue a lightweight request for the reference symbol.

        Raises:
            ConfigurationError:       if the provider has no API key.
            UpstreamUnavailableError: on any non-200 upstream answer, including
                                      a 404 for the reference symbol.
            UpstreamTimeoutError:     if the provider does not answer in time.
        """
        try:
            self._provider.get_daily_prices(self.REFERENCE_SYMBOL)
        except NotFoundError as exc:
            raise UpstreamUnavailableError(
                f"Upstream provider does not list {self.REFERENCE_SYMBOL}."
            ) from exc
        return True
