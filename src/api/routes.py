from __future__ import annotations

import logging

from fastapi import APIRouter

from src.config import settings
from src.models.portfolio import PortfolioSnapshot
from src.models.schemas import (
    PortfolioStatusResponse,
    RefreshResponse,
    SectorsResponse,
    SectorSummaryResponse,
)
from src.services.portfolio_service import PortfolioService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["sector-portfolio-tracker"])

portfolio_service = PortfolioService()


@router.get("/health")
def health() -> dict:
    return {"status": "ok"}


@router.get("/portfolio", response_model=PortfolioSnapshot)
def get_portfolio():
    return portfolio_service.snapshot()


@router.get("/portfolio/sectors", response_model=SectorsResponse)
def get_portfolio_sectors():
    snapshot = portfolio_service.snapshot()
    return SectorsResponse(
        total_investment=snapshot.total_investment,
        total_value=snapshot.total_value,
        sectors=snapshot.sectors,
    )


@router.get("/portfolio/summary", response_model=SectorSummaryResponse)
def get_sector_summary():
    return SectorSummaryResponse(summary=portfolio_service.sector_summary())


@router.get("/portfolio/status", response_model=PortfolioStatusResponse)
def get_portfolio_status():
    snapshot = portfolio_service.snapshot()
    return PortfolioStatusResponse(
        loading=snapshot.loading,
        holdings_count=len(snapshot.holdings),
        sectors_count=len(snapshot.sectors),
        quote_provider=portfolio_service.quote_service.provider_name,
        refresh_interval_seconds=settings.portfolio_refresh_interval_seconds,
        refreshed_at=snapshot.refreshed_at,
        last_error=snapshot.last_error,
    )


@router.post("/portfolio/refresh", response_model=RefreshResponse)
def refresh_portfolio():
    snapshot = portfolio_service.refresh()
    logger.info(
        "Manual portfolio refresh finished",
        extra={"refreshed_at": str(snapshot.refreshed_at), "error": snapshot.last_error},
    )
    return RefreshResponse(
        refreshed=portfolio_service.last_cycle_ran and snapshot.last_error is None,
        refreshed_at=snapshot.refreshed_at,
        last_error=snapshot.last_error,
    )
