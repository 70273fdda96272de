"""
FastAPI route bindings for the stock data use-cases.

This module binds each application use-case to a route callable. Request and
response schemas are an HTTP concern and live here rather than in the domain.
Query parameters are optional at the FastAPI level (no 422 on absence);
the use-cases report every absent field in a single 400.
"""

from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from src.application.use_cases.check_price_alert import CheckPriceAlertUseCase
from src.application.use_cases.check_upstream_health import CheckUpstreamHealthUseCase
from src.application.use_cases.get_historical_prices import GetHistoricalStockPricesUseCase
from src.domain.ports.stock_data_port import IStockDataProvider


class HealthResponse(BaseModel):
    health: bool = True


class PricePointResponse(BaseModel):
    date: str
    close: float


class AlertCheckResponse(BaseModel):
    valid: bool
    message: str


class ErrorResponse(BaseModel):
    detail: str


_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
    504: {"model": ErrorResponse},
}


def create_router(stock_provider: IStockDataProvider) -> APIRouter:
    """Build the service router with use-cases bound to *stock_provider*.

    Route functions are plain ``def`` so FastAPI runs each request in its
    worker threadpool; the provider call is the only blocking step.
    """
    health_uc = CheckUpstreamHealthUseCase(stock_provider)
    historical_uc = GetHistoricalStockPricesUseCase(stock_provider)
    alert_uc = CheckPriceAlertUseCase(stock_provider)

    router = APIRouter()

    @router.get(
        "/health",
        response_model=HealthResponse,
        responses={k: v for k, v in _ERRORS.items() if k >= 500},
    )
    def health() -> HealthResponse:
        """Confirm the service is up and the market-data provider is reachable."""
        return HealthResponse(health=health_uc.execute())

    @router.get("/stocks", response_model=list[PricePointResponse], responses=_ERRORS)
    def stocks(
        ticker: Optional[str] = Query(None, description="Ticker symbol, e.g. AAPL"),
        start_date: Optional[str] = Query(None, alias="startDate", description="e.g. 2024-01-01"),
        interval: Optional[str] = Query(None, description="Resample frequency, e.g. daily"),
    ) -> list[PricePointResponse]:
        """Relay the provider's price history for *ticker* since *startDate*."""
        points = historical_uc.execute(ticker, start_date, interval)
        return [PricePointResponse(date=p.date, close=p.close) for p in points]

    @router.get("/check-alert", response_model=AlertCheckResponse, responses=_ERRORS)
    def check_alert(
        ticker: Optional[str] = Query(None, description="Ticker symbol, e.g. AAPL"),
        price: Optional[str] = Query(None, description="Target price"),
        direction: Optional[str] = Query(None, description="'above' or 'below'"),
    ) -> AlertCheckResponse:
        """Report whether an alert at *price* would be valid, i.e. not already triggered."""
        result = alert_uc.execute(ticker, price, direction)
        return AlertCheckResponse(valid=result.valid, message=result.message)

    return router
