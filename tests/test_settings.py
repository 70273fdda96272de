import pytest

from src.domain.errors import ConfigurationError
from src.infrastructure.config.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "TIINGO_API_KEY",
        "TIINGO_BASE_URL",
        "UPSTREAM_TIMEOUT_SECONDS",
        "HOST",
        "PORT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_api_key():
    settings = Settings.from_env()
    assert settings.tiingo_api_key == ""
    assert not settings.has_api_key
    assert settings.tiingo_base_url == "https://api.tiingo.com"
    assert settings.upstream_timeout_seconds == 6.0
    assert settings.port == 8080
    assert settings.log_level == "INFO"


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("TIINGO_API_KEY", " abc123 ")
    monkeypatch.setenv("TIINGO_BASE_URL", "http://localhost:9000/")
    monkeypatch.setenv("UPSTREAM_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = Settings.from_env()
    assert settings.tiingo_api_key == "abc123"
    assert settings.has_api_key
    assert settings.tiingo_base_url == "http://localhost:9000"
    assert settings.upstream_timeout_seconds == 2.5
    assert settings.port == 9090
    assert settings.log_level == "DEBUG"


def test_settings_are_immutable():
    settings = Settings(tiingo_api_key="abc")
    with pytest.raises(AttributeError):
        settings.tiingo_api_key = "other"


@pytest.mark.parametrize(
    "name, value",
    [
        ("UPSTREAM_TIMEOUT_SECONDS", "soon"),
        ("UPSTREAM_TIMEOUT_SECONDS", "0"),
        ("PORT", "http"),
        ("PORT", "70000"),
    ],
)
def test_invalid_values_raise_config_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigurationError):
        Settings.from_env()
