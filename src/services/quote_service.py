from __future__ import annotations

import logging
from collections.abc import Sequence

from src.config import get_settings
from src.integrations.quotes.providers import BaseQuoteProvider, HttpQuoteProvider, MockQuoteProvider
from src.integrations.quotes.yfinance_provider import YFinanceQuoteProvider
from src.models.holding import Holding
from src.models.quote import LiveQuote
from src.storage.cache import TTLCache

logger = logging.getLogger(__name__)


def merge_quotes(holdings: Sequence[Holding], quotes: Sequence[LiveQuote]) -> list[Holding]:
    by_symbol: dict[str, LiveQuote] = {}
    for quote in quotes:
        by_symbol.setdefault(quote.symbol, quote)

    merged: list[Holding] = []
    for holding in holdings:
        live = by_symbol.get(holding.symbol.strip().upper())
        if live is None:
            merged.append(holding)
            continue
        merged.append(
            holding.model_copy(
                update={
                    "cmp": live.cmp if live.cmp is not None else holding.cmp,
                    "pe_ratio": live.pe_ratio if live.pe_ratio is not None else holding.pe_ratio,
                    "earnings": live.earnings if live.earnings is not None else holding.earnings,
                }
            )
        )
    return merged


class QuoteService:
    def __init__(self, provider: BaseQuoteProvider | None = None) -> None:
        settings = get_settings()
        self.providers: dict[str, BaseQuoteProvider] = {
            "http": HttpQuoteProvider(settings.quote_endpoint_url, timeout_seconds=settings.quote_timeout_seconds),
            "yfinance": YFinanceQuoteProvider(
                cache=TTLCache(default_ttl_seconds=settings.fundamentals_cache_ttl_seconds),
            ),
            "mock": MockQuoteProvider(),
        }
        self.provider = provider or self.providers.get(settings.quote_provider, self.providers["mock"])

    @property
    def provider_name(self) -> str:
        return self.provider.name

    def fetch_and_merge(self, holdings: Sequence[Holding]) -> list[Holding]:
        quotes = self.provider.fetch_quotes(holdings)
        known = {h.symbol.strip().upper() for h in holdings}
        unmatched = [q.symbol for q in quotes if q.symbol not in known]
        if unmatched:
            logger.debug("Ignoring quotes for untracked symbols", extra={"symbols": unmatched})
        logger.info(
            "Live quotes fetched",
            extra={"provider": self.provider.name, "requested": len(holdings), "received": len(quotes)},
        )
        return merge_quotes(holdings, quotes)
