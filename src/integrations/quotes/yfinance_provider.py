from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import pandas as pd
import yfinance as yf

from src.integrations.quotes.providers import BaseQuoteProvider, QuoteProviderError
from src.models.holding import Holding
from src.models.quote import LiveQuote
from src.storage.cache import TTLCache

logger = logging.getLogger(__name__)

EXCHANGE_SUFFIXES: dict[str, str] = {
    "NSE": ".NS",
    "BSE": ".BO",
}


class YFinanceQuoteProvider(BaseQuoteProvider):
    name = "yfinance"

    def __init__(self, cache: TTLCache | None = None, period: str = "5d") -> None:
        self.cache = cache or TTLCache(default_ttl_seconds=3600)
        self.period = period

    @staticmethod
    def to_yahoo_symbol(symbol: str, exchange: str) -> str:
        clean = symbol.strip().upper()
        if not clean or "." in clean:
            return clean
        return f"{clean}{EXCHANGE_SUFFIXES.get(exchange.strip().upper(), '.NS')}"

    def _last_close(self, ticker: Any, yahoo_symbol: str) -> float:
        df = ticker.history(period=self.period, interval="1d", auto_adjust=False)
        if df is None or df.empty or "Close" not in df.columns:
            raise ValueError(f"No price history returned for {yahoo_symbol}")
        closes = pd.to_numeric(df["Close"], errors="coerce").dropna()
        if closes.empty:
            raise ValueError(f"No valid closes for {yahoo_symbol}")
        return float(closes.iloc[-1])

    def _fundamentals(self, ticker: Any, yahoo_symbol: str) -> dict[str, Any]:
        cached = self.cache.get(yahoo_symbol)
        if cached is not None:
            return cached

        try:
            info = ticker.info or {}
        except Exception as exc:
            logger.warning("Yahoo fundamentals fetch failed", extra={"symbol": yahoo_symbol, "error": str(exc)})
            return {}
        if not isinstance(info, dict):
            info = {}

        eps = info.get("trailingEps")
        fundamentals = {
            "pe_ratio": info.get("trailingPE"),
            "earnings": f"EPS {float(eps):.2f}" if isinstance(eps, (int, float)) else None,
        }
        self.cache.set(yahoo_symbol, fundamentals)
        return fundamentals

    def fetch_quote(self, holding: Holding) -> LiveQuote:
        yahoo_symbol = self.to_yahoo_symbol(holding.symbol, holding.exchange)
        ticker = yf.Ticker(yahoo_symbol)
        cmp = self._last_close(ticker, yahoo_symbol)
        fundamentals = self._fundamentals(ticker, yahoo_symbol)
        return LiveQuote(
            symbol=holding.symbol,
            cmp=round(cmp, 2),
            pe_ratio=fundamentals.get("pe_ratio"),
            earnings=fundamentals.get("earnings"),
        )

    def fetch_quotes(self, holdings: Sequence[Holding]) -> list[LiveQuote]:
        quotes: list[LiveQuote] = []
        failed = 0
        for holding in holdings:
            try:
                quotes.append(self.fetch_quote(holding))
            except Exception as exc:
                failed += 1
                logger.warning(
                    "Skipping symbol due to yfinance fetch failure",
                    extra={"symbol": holding.symbol, "error": str(exc)},
                )

        if holdings and failed == len(holdings):
            raise QuoteProviderError(self.name, f"yfinance returned no quotes for {failed} symbols")
        return quotes
