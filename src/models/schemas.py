from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, Field

from src.models.sector import SectorAggregate, SectorSummary


class PortfolioStatusResponse(BaseModel):
    loading: bool
    holdings_count: int
    sectors_count: int
    quote_provider: str
    refresh_interval_seconds: int
    refreshed_at: dt.datetime | None = None
    last_error: str | None = None


class SectorsResponse(BaseModel):
    total_investment: float
    total_value: float
    sectors: list[SectorAggregate] = Field(default_factory=list)


class SectorSummaryResponse(BaseModel):
    summary: list[SectorSummary] = Field(default_factory=list)


class RefreshResponse(BaseModel):
    refreshed: bool
    refreshed_at: dt.datetime | None = None
    last_error: str | None = None
