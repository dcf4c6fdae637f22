from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from pydantic import ValidationError

from src.models.holding import Holding
from src.models.quote import LiveQuote

logger = logging.getLogger(__name__)


class QuoteProviderError(RuntimeError):
    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider


class BaseQuoteProvider(ABC):
    name: str = "base"

    @abstractmethod
    def fetch_quotes(self, holdings: Sequence[Holding]) -> list[LiveQuote]:
        raise NotImplementedError


def parse_live_quotes(payload: Any) -> list[LiveQuote]:
    if not isinstance(payload, list):
        raise ValueError(f"Expected a list of quotes, got {type(payload).__name__}")

    quotes: list[LiveQuote] = []
    for item in payload:
        if not isinstance(item, dict):
            continue
        try:
            quote = LiveQuote.model_validate(item)
        except ValidationError:
            logger.warning("Skipping malformed quote record", extra={"record": str(item)[:200]})
            continue
        if quote.symbol:
            quotes.append(quote)
    return quotes


class HttpQuoteProvider(BaseQuoteProvider):
    """Posts the tracked symbols to the portfolio backend and reads back live quotes."""

    name = "http"

    def __init__(self, endpoint_url: str, timeout_seconds: float = 15) -> None:
        self.endpoint_url = endpoint_url
        self.timeout_seconds = timeout_seconds

    def _build_request(self, holdings: Sequence[Holding]) -> Request:
        body = {"stocks": [{"symbol": h.symbol} for h in holdings]}
        return Request(
            self.endpoint_url,
            data=json.dumps(body).encode("utf-8"),
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            method="POST",
        )

    def fetch_quotes(self, holdings: Sequence[Holding]) -> list[LiveQuote]:
        req = self._build_request(holdings)
        try:
            with urlopen(req, timeout=self.timeout_seconds) as resp:
                status = getattr(resp, "status", 200)
                logger.info("Quote backend responded", extra={"status": status, "symbols": len(holdings)})
                if not 200 <= status < 300:
                    raise QuoteProviderError(self.name, f"Quote backend returned HTTP {status}")
                raw = resp.read().decode("utf-8", errors="ignore")
        except HTTPError as exc:
            raise QuoteProviderError(self.name, f"Quote backend returned HTTP {exc.code}") from exc
        except (URLError, OSError) as exc:
            raise QuoteProviderError(self.name, f"Quote backend unreachable: {exc}") from exc

        try:
            return parse_live_quotes(json.loads(raw))
        except ValueError as exc:
            raise QuoteProviderError(self.name, f"Invalid quote payload: {exc}") from exc


class MockQuoteProvider(BaseQuoteProvider):
    name = "mock"

    def fetch_quotes(self, holdings: Sequence[Holding]) -> list[LiveQuote]:
        quotes: list[LiveQuote] = []
        for holding in holdings:
            seed = sum(ord(ch) for ch in holding.symbol)
            base = holding.purchase_price or float(100 + seed % 3000)
            drift = ((seed % 21) - 10) / 100
            quotes.append(
                LiveQuote(
                    symbol=holding.symbol,
                    cmp=round(base * (1 + drift), 2),
                    pe_ratio=round(10 + (seed % 400) / 10, 2),
                    earnings=f"EPS {round(base / 25, 2):.2f}",
                )
            )
        return quotes
