from __future__ import annotations

from collections.abc import Iterable

from src.models.holding import Holding
from src.storage.seed_holdings import SEED_HOLDINGS
from src.utils.validation import validate_symbol


class HoldingRepository:
    def __init__(self, records: Iterable[dict] | None = None) -> None:
        self._holdings: list[Holding] = []
        seen: set[str] = set()
        for record in SEED_HOLDINGS if records is None else records:
            symbol = validate_symbol(str(record.get("symbol", "")))
            if symbol in seen:
                raise ValueError(f"Duplicate holding symbol: {symbol}")
            seen.add(symbol)
            self._holdings.append(Holding(**{**record, "symbol": symbol}))

    def list_holdings(self) -> list[Holding]:
        return list(self._holdings)

    def list_symbols(self) -> list[str]:
        return [h.symbol for h in self._holdings]

    def sectors(self) -> list[str]:
        order: list[str] = []
        for holding in self._holdings:
            if holding.sector not in order:
                order.append(holding.sector)
        return order
