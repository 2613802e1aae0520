from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional


ENV_DATA_BASE_URL = "PORTFOLIO_DATA_BASE_URL"
ENV_HTTP_TIMEOUT = "PORTFOLIO_HTTP_TIMEOUT"
ENV_TYPING_INTERVAL_MS = "PORTFOLIO_TYPING_INTERVAL_MS"
ENV_LOG_LEVEL = "PORTFOLIO_LOG_LEVEL"

DEFAULT_DATA_BASE_URL = "http://localhost:4200/"
DEFAULT_HTTP_TIMEOUT = 15.0
DEFAULT_TYPING_INTERVAL_MS = 50
DEFAULT_LOG_LEVEL = "INFO"

# The page is only ever rendered in French.
DISPLAY_LOCALE = "fr"


class ConfigError(RuntimeError):
    """Raised when an environment setting is present but invalid."""


@dataclass(frozen=True)
class PortfolioConfig:
    data_base_url: str = DEFAULT_DATA_BASE_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    typing_interval_ms: int = DEFAULT_TYPING_INTERVAL_MS
    log_level: str = DEFAULT_LOG_LEVEL
    locale: str = DISPLAY_LOCALE

    @property
    def typing_interval(self) -> float:
        """Typing tick interval in seconds."""
        return self.typing_interval_ms / 1000.0


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.environ.get(name)
    return v if v not in (None, "") else default


def _positive_float(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{name} must be > 0, got {raw!r}")
    return value


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"{name} must be > 0, got {raw!r}")
    return value


def _log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{ENV_LOG_LEVEL} must be a logging level name, got {raw!r}")
    return level


def load_config() -> PortfolioConfig:
    """Build the page configuration from the environment (unset values use defaults)."""
    base_url = _getenv(ENV_DATA_BASE_URL, DEFAULT_DATA_BASE_URL)
    timeout_raw = _getenv(ENV_HTTP_TIMEOUT)
    interval_raw = _getenv(ENV_TYPING_INTERVAL_MS)
    level_raw = _getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)

    return PortfolioConfig(
        data_base_url=base_url or DEFAULT_DATA_BASE_URL,
        http_timeout=(
            _positive_float(ENV_HTTP_TIMEOUT, timeout_raw) if timeout_raw else DEFAULT_HTTP_TIMEOUT
        ),
        typing_interval_ms=(
            _positive_int(ENV_TYPING_INTERVAL_MS, interval_raw)
            if interval_raw
            else DEFAULT_TYPING_INTERVAL_MS
        ),
        log_level=_log_level(level_raw or DEFAULT_LOG_LEVEL),
    )


__all__ = [
    "ConfigError",
    "DISPLAY_LOCALE",
    "PortfolioConfig",
    "load_config",
]
