from pydantic import BaseModel, ConfigDict, Field, computed_field

from src.utils.formatting import format_percent


class Holding(BaseModel):
    model_config = ConfigDict(frozen=True)

    symbol: str
    name: str
    sector: str
    exchange: str = "NSE"
    purchase_price: float = Field(ge=0)
    quantity: int = Field(ge=0)
    cmp: float = 0.0
    pe_ratio: float = 0.0
    earnings: str = ""


class ComputedHolding(Holding):
    investment: float
    present_value: float
    gain_loss: float
    return_percent: float
    portfolio_percent: float

    @computed_field
    @property
    def return_percent_display(self) -> str:
        return format_percent(self.return_percent)

    @computed_field
    @property
    def portfolio_percent_display(self) -> str:
        return format_percent(self.portfolio_percent)
