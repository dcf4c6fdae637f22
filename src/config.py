from __future__ import annotations

import os
from dataclasses import dataclass


SUPPORTED_QUOTE_PROVIDERS = {"http", "yfinance", "mock"}
DEFAULT_QUOTE_ENDPOINT_URL = "https://stock-portfolio-backend-xqnz.onrender.com/api/portfolio"


def _current_quote_provider() -> str:
    raw = os.getenv("QUOTE_PROVIDER", "http").strip().lower()
    if not raw:
        return "http"
    if raw not in SUPPORTED_QUOTE_PROVIDERS:
        raise ValueError(f"Invalid QUOTE_PROVIDER: {raw}. Supported values: {sorted(SUPPORTED_QUOTE_PROVIDERS)}")
    return raw


def _get_first_set(*env_names: str) -> str:
    for env_name in env_names:
        value = os.getenv(env_name, "").strip()
        if value:
            return value
    return ""


@dataclass(frozen=True)
class Settings:
    app_name: str = os.getenv("APP_NAME", "sector_portfolio_tracker")
    app_debug: bool = os.getenv("APP_DEBUG", "false").lower() == "true"
    app_host: str = os.getenv("APP_HOST", "0.0.0.0")
    app_port: int = int(os.getenv("APP_PORT", "8004"))

    quote_provider: str = _current_quote_provider()
    quote_endpoint_url: str = _get_first_set("QUOTE_ENDPOINT_URL", "PORTFOLIO_BACKEND_URL") or DEFAULT_QUOTE_ENDPOINT_URL
    quote_timeout_seconds: int = int(os.getenv("QUOTE_TIMEOUT_SECONDS", "15"))
    fundamentals_cache_ttl_seconds: int = int(os.getenv("FUNDAMENTALS_CACHE_TTL_SECONDS", "3600"))

    portfolio_refresh_interval_seconds: int = int(os.getenv("PORTFOLIO_REFRESH_INTERVAL_SECONDS", "60"))
    portfolio_refresh_enabled: bool = os.getenv("PORTFOLIO_REFRESH_ENABLED", "true").lower() == "true"


settings = Settings()


def get_settings() -> Settings:
    return settings
