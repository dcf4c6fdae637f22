from __future__ import annotations

import json
from urllib.error import HTTPError, URLError

import pandas as pd
import pytest

from src.integrations.quotes import providers as providers_module
from src.integrations.quotes import yfinance_provider as yfinance_module
from src.integrations.quotes.providers import HttpQuoteProvider, MockQuoteProvider, QuoteProviderError
from src.integrations.quotes.yfinance_provider import YFinanceQuoteProvider


class FakeResponse:
    def __init__(self, body: str, status: int = 200) -> None:
        self.body = body
        self.status = status

    def read(self) -> bytes:
        return self.body.encode("utf-8")

    def __enter__(self) -> FakeResponse:
        return self

    def __exit__(self, *exc_info) -> None:
        return None


def test_http_provider_posts_symbols_and_parses_quotes(monkeypatch, make_holding) -> None:
    captured = {}

    def fake_urlopen(req, timeout=None):
        captured["url"] = req.full_url
        captured["method"] = req.get_method()
        captured["body"] = json.loads(req.data.decode("utf-8"))
        captured["timeout"] = timeout
        return FakeResponse(
            json.dumps(
                [
                    {"symbol": "A", "cmp": 101.5, "peRatio": 22.1, "earnings": "EPS 4.10"},
                    {"symbol": "B"},
                    "garbage",
                ]
            )
        )

    monkeypatch.setattr(providers_module, "urlopen", fake_urlopen)
    provider = HttpQuoteProvider("http://quotes.test/api/portfolio", timeout_seconds=3)

    quotes = provider.fetch_quotes([make_holding(symbol="A"), make_holding(symbol="B")])

    assert captured["url"] == "http://quotes.test/api/portfolio"
    assert captured["method"] == "POST"
    assert captured["body"] == {"stocks": [{"symbol": "A"}, {"symbol": "B"}]}
    assert captured["timeout"] == 3
    assert [q.symbol for q in quotes] == ["A", "B"]
    assert quotes[0].pe_ratio == 22.1
    assert quotes[1].cmp is None


def test_http_provider_non_success_status(monkeypatch, make_holding) -> None:
    def fake_urlopen(req, timeout=None):
        raise HTTPError(req.full_url, 503, "Service Unavailable", None, None)

    monkeypatch.setattr(providers_module, "urlopen", fake_urlopen)

    with pytest.raises(QuoteProviderError) as exc_info:
        HttpQuoteProvider("http://quotes.test").fetch_quotes([make_holding()])
    assert "503" in str(exc_info.value)
    assert exc_info.value.provider == "http"


def test_http_provider_unreachable(monkeypatch, make_holding) -> None:
    def fake_urlopen(req, timeout=None):
        raise URLError("connection refused")

    monkeypatch.setattr(providers_module, "urlopen", fake_urlopen)

    with pytest.raises(QuoteProviderError):
        HttpQuoteProvider("http://quotes.test").fetch_quotes([make_holding()])


def test_http_provider_rejects_non_list_payload(monkeypatch, make_holding) -> None:
    monkeypatch.setattr(providers_module, "urlopen", lambda req, timeout=None: FakeResponse('{"error": "boom"}'))

    with pytest.raises(QuoteProviderError):
        HttpQuoteProvider("http://quotes.test").fetch_quotes([make_holding()])


def test_mock_provider_is_deterministic(make_holding) -> None:
    holdings = [make_holding(symbol="TCS"), make_holding(symbol="INFY")]
    provider = MockQuoteProvider()

    first = provider.fetch_quotes(holdings)
    second = provider.fetch_quotes(holdings)

    assert first == second
    assert [q.symbol for q in first] == ["TCS", "INFY"]
    assert all(q.cmp and q.cmp > 0 for q in first)


class FakeTicker:
    info_calls = 0
    failing: set[str] = set()

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol

    def history(self, period: str, interval: str, auto_adjust: bool):
        if self.symbol in self.failing:
            return pd.DataFrame()
        return pd.DataFrame({"Close": [100.0, 104.5]})

    @property
    def info(self) -> dict:
        FakeTicker.info_calls += 1
        return {"trailingPE": 25.5, "trailingEps": 4.2}


@pytest.fixture
def fake_ticker(monkeypatch):
    FakeTicker.info_calls = 0
    FakeTicker.failing = set()
    monkeypatch.setattr(yfinance_module.yf, "Ticker", FakeTicker)
    return FakeTicker


def test_yfinance_provider_builds_quotes(fake_ticker, make_holding) -> None:
    provider = YFinanceQuoteProvider()

    [quote] = provider.fetch_quotes([make_holding(symbol="TCS", exchange="NSE")])

    assert quote.symbol == "TCS"
    assert quote.cmp == 104.5
    assert quote.pe_ratio == 25.5
    assert quote.earnings == "EPS 4.20"


def test_yfinance_provider_caches_fundamentals(fake_ticker, make_holding) -> None:
    provider = YFinanceQuoteProvider()
    holdings = [make_holding(symbol="TCS")]

    provider.fetch_quotes(holdings)
    provider.fetch_quotes(holdings)

    assert fake_ticker.info_calls == 1


def test_yfinance_provider_skips_failed_symbols(fake_ticker, make_holding) -> None:
    fake_ticker.failing = {"BAD.NS"}
    provider = YFinanceQuoteProvider()

    quotes = provider.fetch_quotes([make_holding(symbol="BAD"), make_holding(symbol="GOOD")])
    assert [q.symbol for q in quotes] == ["GOOD"]

    with pytest.raises(QuoteProviderError):
        provider.fetch_quotes([make_holding(symbol="BAD")])


def test_yahoo_symbol_suffix() -> None:
    assert YFinanceQuoteProvider.to_yahoo_symbol("tcs", "NSE") == "TCS.NS"
    assert YFinanceQuoteProvider.to_yahoo_symbol("RELIANCE", "BSE") == "RELIANCE.BO"
    assert YFinanceQuoteProvider.to_yahoo_symbol("AAPL.US", "NASDAQ") == "AAPL.US"
