"""
Domain exceptions shared by every layer.

Each exception carries the HTTP status the entrypoint should answer with, so
use cases and adapters never import the web framework.
"""


class MarketServiceError(Exception):
    """Base exception for all service errors."""

    status_code: int = 500


class InvalidRequestError(MarketServiceError):
    """Raised when query parameters are missing or malformed."""

    status_code = 400


class AlertAlreadyTriggeredError(InvalidRequestError):
    """Raised when the requested alert would fire at the current price."""


class NotFoundError(MarketServiceError):
    """Raised when the upstream provider has no data for a ticker."""

    status_code = 404


class ConfigurationError(MarketServiceError):
    """Raised when required configuration is missing or invalid."""

    status_code = 500


class UpstreamUnavailableError(MarketServiceError):
    """Raised when the market-data provider cannot be reached or misbehaves."""

    status_code = 502


class UpstreamTimeoutError(UpstreamUnavailableError):
    """Raised when the market-data provider does not answer in time."""

    status_code = 504
