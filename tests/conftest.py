from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("QUOTE_PROVIDER", "mock")
os.environ.setdefault("PORTFOLIO_REFRESH_ENABLED", "false")


@pytest.fixture
def make_holding():
    from src.models.holding import Holding

    def _make(symbol: str = "X", sector: str = "Tech", purchase_price: float = 100.0, quantity: int = 10, cmp: float = 120.0, **extra):
        return Holding(
            symbol=symbol,
            name=extra.pop("name", f"{symbol} Ltd"),
            sector=sector,
            exchange=extra.pop("exchange", "NSE"),
            purchase_price=purchase_price,
            quantity=quantity,
            cmp=cmp,
            pe_ratio=extra.pop("pe_ratio", 20.0),
            earnings=extra.pop("earnings", "EPS 5.00"),
        )

    return _make


@pytest.fixture
def test_ctx(monkeypatch) -> Generator[dict, None, None]:
    import src.app as app_module
    from src.api import routes
    from src.integrations.quotes.providers import MockQuoteProvider
    from src.services.portfolio_service import PortfolioService
    from src.services.quote_service import QuoteService

    service = PortfolioService(quote_service=QuoteService(provider=MockQuoteProvider()))
    monkeypatch.setattr(routes, "portfolio_service", service)
    monkeypatch.setattr(app_module.portfolio_refresh_scheduler, "portfolio_service", service)
    monkeypatch.setattr(app_module.portfolio_refresh_scheduler, "enabled", False)

    with TestClient(app_module.app) as client:
        yield {
            "client": client,
            "service": service,
        }
