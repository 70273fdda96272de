"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints.fastapi_app import create_app
from tests.fakes import FakeStockDataProvider


@pytest.fixture
def provider() -> FakeStockDataProvider:
    return FakeStockDataProvider()


@pytest.fixture
def client(provider) -> TestClient:
    app = create_app(settings=Settings(tiingo_api_key="test-token"), stock_provider=provider)
    return TestClient(app)
