from __future__ import annotations

from collections.abc import Sequence

from src.models.holding import ComputedHolding, Holding
from src.models.sector import SectorAggregate, SectorSummary
from src.utils.formatting import safe_percent

SECTOR_COLORS: tuple[str, ...] = (
    "from-blue-600 to-blue-500",
    "from-purple-600 to-purple-500",
    "from-green-600 to-green-500",
    "from-orange-600 to-orange-500",
    "from-pink-600 to-pink-500",
    "from-indigo-600 to-indigo-500",
    "from-teal-600 to-teal-500",
    "from-cyan-600 to-cyan-500",
    "from-red-600 to-red-500",
    "from-amber-600 to-amber-500",
)


def sector_color(sector: str, palette: Sequence[str] = SECTOR_COLORS) -> str:
    if not palette:
        raise ValueError("Color palette cannot be empty")
    code_sum = sum(ord(ch) for ch in sector)
    return palette[code_sum % len(palette)]


def _group_by_sector(items: Sequence) -> tuple[list[str], dict[str, list]]:
    # dict order is not relied on; `order` records first-seen sectors
    order: list[str] = []
    grouped: dict[str, list] = {}
    for item in items:
        members = grouped.get(item.sector)
        if members is None:
            members = []
            grouped[item.sector] = members
            order.append(item.sector)
        members.append(item)
    return order, grouped


def aggregate_sectors(computed: Sequence[ComputedHolding]) -> list[SectorAggregate]:
    order, grouped = _group_by_sector(computed)

    sectors: list[SectorAggregate] = []
    for sector in order:
        members = grouped[sector]
        total_investment = 0.0
        total_value = 0.0
        for holding in members:
            total_investment += holding.investment
            total_value += holding.present_value
        sector_gain = total_value - total_investment
        sectors.append(
            SectorAggregate(
                sector=sector,
                color=sector_color(sector),
                holdings=list(members),
                total_investment=total_investment,
                total_value=total_value,
                sector_gain=sector_gain,
                sector_return=safe_percent(sector_gain, total_investment),
            )
        )
    return sectors


def summarize_sectors(holdings: Sequence[Holding]) -> list[SectorSummary]:
    order, grouped = _group_by_sector(holdings)

    summary: list[SectorSummary] = []
    for sector in order:
        investment = sum(h.purchase_price * h.quantity for h in grouped[sector])
        present = sum(h.cmp * h.quantity for h in grouped[sector])
        summary.append(
            SectorSummary(
                sector=sector,
                investment=investment,
                gain_loss=round(present - investment, 2),
            )
        )
    return summary
