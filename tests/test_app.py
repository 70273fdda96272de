from fastapi.testclient import TestClient

from src.infrastructure.config.settings import Settings
from src.infrastructure.entrypoints import fastapi_app
from src.infrastructure.stock_data.tiingo_adapter import TiingoStockDataProvider


def test_openapi_lists_all_routes(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert {"/health", "/stocks", "/check-alert"} <= set(paths)


def test_unknown_route_keeps_detail_shape(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert "detail" in resp.json()


def test_missing_api_key_is_per_request_error():
    app = fastapi_app.create_app(settings=Settings(tiingo_api_key=""))
    with TestClient(app) as client:
        resp = client.get("/health")
        assert resp.status_code == 500
        assert resp.json() == {"detail": "Missing API key."}

        # Parameter validation still runs first.
        resp = client.get("/stocks", params={"ticker": "AAPL"})
        assert resp.status_code == 400


def test_load_settings_pulls_secret_when_arn_set(monkeypatch):
    loaded = []

    class StubSecretsManagerAdapter:
        def load_into_env(self, secret_id, overwrite=False):
            loaded.append(secret_id)
            monkeypatch.setenv("TIINGO_API_KEY", "from-secret")
            return ["TIINGO_API_KEY"]

    monkeypatch.setattr(fastapi_app, "load_dotenv", lambda: False)
    monkeypatch.setattr(
        "src.infrastructure.secrets.secrets_manager_adapter.SecretsManagerAdapter",
        StubSecretsManagerAdapter,
    )
    monkeypatch.delenv("TIINGO_API_KEY", raising=False)
    monkeypatch.setenv("TIINGO_SECRET_ARN", "arn:aws:secretsmanager:us-east-1:1:secret:x")

    settings = fastapi_app.load_settings()

    assert loaded == ["arn:aws:secretsmanager:us-east-1:1:secret:x"]
    assert settings.tiingo_api_key == "from-secret"


def test_load_settings_without_arn_skips_secret_store(monkeypatch):
    monkeypatch.setattr(fastapi_app, "load_dotenv", lambda: False)
    monkeypatch.delenv("TIINGO_SECRET_ARN", raising=False)
    monkeypatch.setenv("TIINGO_API_KEY", "plain")

    assert fastapi_app.load_settings().tiingo_api_key == "plain"


def test_tiingo_provider_applies_settings():
    provider = TiingoStockDataProvider(api_key="k", base_url="http://localhost:1", timeout=0.5)
    try:
        assert provider._client.timeout.read == 0.5
        assert provider._client.timeout.connect == 0.5
        assert str(provider._client.base_url).rstrip("/") == "http://localhost:1"
    finally:
        provider.close()


def test_app_keeps_the_settings_it_was_built_with(provider):
    settings = Settings(tiingo_api_key="k", port=9000)
    app = fastapi_app.create_app(settings=settings, stock_provider=provider)
    assert app.state.settings is settings


def test_load_settings_reads_dotenv_once(monkeypatch):
    calls = []
    monkeypatch.setattr(fastapi_app, "load_dotenv", lambda: calls.append(1))
    monkeypatch.delenv("TIINGO_SECRET_ARN", raising=False)

    fastapi_app.load_settings()

    assert calls == [1]
