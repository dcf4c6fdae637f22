from __future__ import annotations

import logging
import threading

from src.config import settings
from src.services.portfolio_service import PortfolioService

logger = logging.getLogger(__name__)


class PortfolioRefreshScheduler:
    def __init__(
        self,
        portfolio_service: PortfolioService,
        interval_seconds: float | None = None,
        enabled: bool | None = None,
        join_timeout_seconds: float = 5,
    ) -> None:
        self.portfolio_service = portfolio_service
        if interval_seconds is None:
            interval_seconds = max(1, settings.portfolio_refresh_interval_seconds)
        self.interval_seconds = interval_seconds
        self.enabled = settings.portfolio_refresh_enabled if enabled is None else enabled
        self.join_timeout_seconds = join_timeout_seconds
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return bool(self._thread and self._thread.is_alive() and not self._stop_event.is_set())

    def start(self) -> None:
        self.portfolio_service.activate()
        if not self.enabled:
            return
        if self.running:
            return
        # a loop left behind by a timed-out stop() keeps its own, already set, event
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run_loop,
            args=(self._stop_event,),
            name="portfolio-quote-refresh",
            daemon=True,
        )
        self._thread.start()
        logger.info(
            "Portfolio refresh scheduler started",
            extra={"interval_seconds": self.interval_seconds},
        )

    def stop(self) -> None:
        self._stop_event.set()
        self.portfolio_service.deactivate()
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=self.join_timeout_seconds)
            if self._thread.is_alive():
                logger.warning(
                    "Portfolio refresh thread still busy after stop",
                    extra={"timeout_seconds": self.join_timeout_seconds},
                )
        self._thread = None

    def _run_loop(self, stop_event: threading.Event) -> None:
        self._run_once()
        while not stop_event.wait(self.interval_seconds):
            self._run_once()

    def _run_once(self) -> None:
        try:
            self.portfolio_service.refresh()
        except Exception as exc:
            logger.exception("Portfolio refresh cycle failed", extra={"error": str(exc)})
