from pydantic import BaseModel, Field, computed_field

from src.models.holding import ComputedHolding
from src.utils.formatting import format_percent


class SectorAggregate(BaseModel):
    sector: str
    color: str
    holdings: list[ComputedHolding] = Field(default_factory=list)
    total_investment: float
    total_value: float
    sector_gain: float
    sector_return: float

    @computed_field
    @property
    def sector_return_display(self) -> str:
        return format_percent(self.sector_return)


class SectorSummary(BaseModel):
    sector: str
    investment: float
    gain_loss: float
