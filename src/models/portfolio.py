from datetime import datetime

from pydantic import BaseModel, Field, computed_field

from src.models.holding import ComputedHolding, Holding
from src.models.sector import SectorAggregate
from src.utils.formatting import format_percent


class PortfolioSnapshot(BaseModel):
    holdings: list[Holding] = Field(default_factory=list)
    computed: list[ComputedHolding] = Field(default_factory=list)
    sectors: list[SectorAggregate] = Field(default_factory=list)
    total_investment: float = 0.0
    total_value: float = 0.0
    total_gain: float = 0.0
    total_return: float = 0.0
    loading: bool = False
    refreshed_at: datetime | None = None
    last_error: str | None = None

    @computed_field
    @property
    def total_return_display(self) -> str:
        return format_percent(self.total_return)
