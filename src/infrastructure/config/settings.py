"""Environment-driven service configuration."""

import os
from dataclasses import dataclass

from src.domain.errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """Runtime settings, built once at startup and never mutated."""

    tiingo_api_key: str = ""
    tiingo_base_url: str = "https://api.tiingo.com"
    upstream_timeout_seconds: float = 6.0
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.tiingo_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables.

        A missing TIINGO_API_KEY is allowed here: handlers that need the
        upstream report it per request.
        """
        try:
            settings = cls(
                tiingo_api_key=os.getenv("TIINGO_API_KEY", "").strip(),
                tiingo_base_url=os.getenv("TIINGO_BASE_URL", cls.tiingo_base_url).strip().rstrip("/"),
                upstream_timeout_seconds=float(os.getenv("UPSTREAM_TIMEOUT_SECONDS", "6")),
                host=os.getenv("HOST", cls.host).strip(),
                port=int(os.getenv("PORT", "8080")),
                log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
            )
        except ValueError as exc:
            raise ConfigurationError(
                "UPSTREAM_TIMEOUT_SECONDS and PORT must be numeric."
            ) from exc

        return settings.validate()

    def validate(self) -> "Settings":
        if self.upstream_timeout_seconds <= 0:
            raise ConfigurationError("UPSTREAM_TIMEOUT_SECONDS must be positive.")
        if not 0 < self.port < 65536:
            raise ConfigurationError("PORT must be between 1 and 65535.")
        return self
