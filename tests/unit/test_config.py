from __future__ import annotations

import pytest

from portfolio.config import ConfigError, PortfolioConfig, load_config


_ENV = (
    "PORTFOLIO_DATA_BASE_URL",
    "PORTFOLIO_HTTP_TIMEOUT",
    "PORTFOLIO_TYPING_INTERVAL_MS",
    "PORTFOLIO_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = load_config()
    assert cfg == PortfolioConfig()
    assert cfg.typing_interval == 0.05
    assert cfg.locale == "fr"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PORTFOLIO_DATA_BASE_URL", "https://example.org/site/")
    monkeypatch.setenv("PORTFOLIO_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("PORTFOLIO_TYPING_INTERVAL_MS", "20")
    monkeypatch.setenv("PORTFOLIO_LOG_LEVEL", "debug")

    cfg = load_config()

    assert cfg.data_base_url == "https://example.org/site/"
    assert cfg.http_timeout == 2.5
    assert cfg.typing_interval_ms == 20
    assert cfg.log_level == "DEBUG"


def test_empty_values_fall_back(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PORTFOLIO_HTTP_TIMEOUT", "")
    assert load_config().http_timeout == 15.0


@pytest.mark.parametrize(
    "name,value",
    [
        ("PORTFOLIO_HTTP_TIMEOUT", "abc"),
        ("PORTFOLIO_HTTP_TIMEOUT", "-1"),
        ("PORTFOLIO_TYPING_INTERVAL_MS", "0"),
        ("PORTFOLIO_TYPING_INTERVAL_MS", "1.5"),
        ("PORTFOLIO_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        load_config()
