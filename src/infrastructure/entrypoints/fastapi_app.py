"""
FastAPI entry point.

This module is the Composition Root: it loads settings, wires the Tiingo
adapter into the use-cases via create_router(), and maps domain errors onto
HTTP responses of the shape {"detail": "<message>"}.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8080
or:
    python -m src.infrastructure.entrypoints.fastapi_app
"""

import logging
import os
import time
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.domain.errors import MarketServiceError
from src.domain.ports.stock_data_port import IStockDataProvider
from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.http_routes import create_router
from src.infrastructure.logging_config import setup_logging
from src.infrastructure.stock_data.tiingo_adapter import TiingoStockDataProvider

logger = logging.getLogger("market_service.http")

ENDPOINTS = (
    "GET  /health",
    "GET  /stocks?ticker=<symbol>&startDate=<date>&interval=<freq>",
    "GET  /check-alert?ticker=<symbol>&price=<price>&direction=<above|below>",
)


def load_settings() -> Settings:
    """Resolve settings from .env and the environment.

    Secrets are pulled from AWS first when TIINGO_SECRET_ARN is set.
    """
    load_dotenv()
    secret_arn = os.environ.get("TIINGO_SECRET_ARN")
    if secret_arn:
        from src.infrastructure.secrets.secrets_manager_adapter import SecretsManagerAdapter

        SecretsManagerAdapter().load_into_env(secret_arn)
    return Settings.from_env()


def create_app(
    settings: Optional[Settings] = None,
    stock_provider: Optional[IStockDataProvider] = None,
) -> FastAPI:
    """Build the FastAPI app.

    Args:
        settings:       Pre-built settings; loaded from the environment if omitted.
        stock_provider: IStockDataProvider to inject (tests pass a fake). A
                        TiingoStockDataProvider is built from *settings* otherwise
                        and closed on shutdown.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    owned_provider: Optional[TiingoStockDataProvider] = None
    if stock_provider is None:
        owned_provider = TiingoStockDataProvider(
            api_key=settings.tiingo_api_key,
            base_url=settings.tiingo_base_url,
            timeout=settings.upstream_timeout_seconds,
        )
        stock_provider = owned_provider

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        logger.info("Starting Market Service on http://%s:%s", settings.host, settings.port)
        for endpoint in ENDPOINTS:
            logger.info("  %s", endpoint)
        if not settings.has_api_key:
            logger.warning("TIINGO_API_KEY is not set; upstream requests will fail.")
        yield
        if owned_provider is not None:
            owned_provider.close()

    app = FastAPI(title="Market Service", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.include_router(create_router(stock_provider))

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logger.info("Started %s %s", request.method, request.url.path)
        response = await call_next(request)
        logger.info(
            "Completed %s %s -> %s in %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    @app.exception_handler(MarketServiceError)
    async def market_service_error_handler(request: Request, exc: MarketServiceError):
        level = logging.WARNING if exc.status_code < 500 else logging.ERROR
        logger.log(level, "%s %s failed (%s): %s", request.method, request.url.path, exc.status_code, exc)
        return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings: Settings = app.state.settings
    uvicorn.run(app, host=_settings.host, port=_settings.port, log_level=_settings.log_level.lower())
