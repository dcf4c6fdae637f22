from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from src.models.holding import Holding
from src.models.portfolio import PortfolioSnapshot
from src.models.sector import SectorSummary
from src.services.metrics_service import compute_holdings, portfolio_totals
from src.services.quote_service import QuoteService
from src.services.sector_service import aggregate_sectors, summarize_sectors
from src.storage.repository import HoldingRepository

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[PortfolioSnapshot], None]


def build_snapshot(
    holdings: list[Holding],
    loading: bool = False,
    refreshed_at: datetime | None = None,
    last_error: str | None = None,
) -> PortfolioSnapshot:
    computed = compute_holdings(holdings)
    return PortfolioSnapshot(
        holdings=holdings,
        computed=computed,
        sectors=aggregate_sectors(computed),
        loading=loading,
        refreshed_at=refreshed_at,
        last_error=last_error,
        **portfolio_totals(computed),
    )


class PortfolioService:
    def __init__(
        self,
        repository: HoldingRepository | None = None,
        quote_service: QuoteService | None = None,
    ) -> None:
        self.repository = repository or HoldingRepository()
        self.quote_service = quote_service or QuoteService()
        self._holdings: list[Holding] = self.repository.list_holdings()
        self._loading = False
        self._refreshed_at: datetime | None = None
        self._last_error: str | None = None
        self._active = True
        self._last_cycle_ran = False
        self._listeners: list[SnapshotListener] = []
        self._snapshot = build_snapshot(self._holdings)

    @property
    def active(self) -> bool:
        return self._active

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def last_cycle_ran(self) -> bool:
        return self._last_cycle_ran

    def snapshot(self) -> PortfolioSnapshot:
        return self._snapshot

    def sector_summary(self) -> list[SectorSummary]:
        return summarize_sectors(self._holdings)

    def subscribe(self, listener: SnapshotListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: SnapshotListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False
        self._loading = False
        self._snapshot = self._snapshot.model_copy(update={"loading": False})

    def refresh(self) -> PortfolioSnapshot:
        if not self._active:
            self._last_cycle_ran = False
            return self._snapshot

        base = self._holdings
        self._set_loading(True)
        try:
            merged = self.quote_service.fetch_and_merge(base)
        except Exception as exc:
            logger.exception("Failed to fetch live quotes", extra={"error": str(exc)})
            self._last_cycle_ran = self._active
            if self._active:
                self._last_error = str(exc)
        else:
            self._last_cycle_ran = self._active
            if self._active:
                self._holdings = merged
                self._refreshed_at = datetime.now(timezone.utc)
                self._last_error = None
            else:
                logger.info("Discarding quotes that arrived after shutdown", extra={"symbols": len(merged)})
        finally:
            if self._active:
                self._set_loading(False)
        return self._snapshot

    def _set_loading(self, loading: bool) -> None:
        self._loading = loading
        self._publish()

    def _publish(self) -> None:
        self._snapshot = build_snapshot(
            self._holdings,
            loading=self._loading,
            refreshed_at=self._refreshed_at,
            last_error=self._last_error,
        )
        for listener in list(self._listeners):
            try:
                listener(self._snapshot)
            except Exception as exc:
                logger.exception("Portfolio listener failed", extra={"error": str(exc)})
