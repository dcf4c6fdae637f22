from __future__ import annotations

from collections.abc import Sequence

from src.models.holding import ComputedHolding, Holding
from src.utils.formatting import safe_percent


def holding_investment(holding: Holding) -> float:
    return holding.purchase_price * holding.quantity


def grand_total_investment(holdings: Sequence[Holding]) -> float:
    return sum(holding_investment(h) for h in holdings)


def compute_holdings(holdings: Sequence[Holding]) -> list[ComputedHolding]:
    total_investment = grand_total_investment(holdings)

    computed: list[ComputedHolding] = []
    for holding in holdings:
        investment = holding_investment(holding)
        present_value = holding.cmp * holding.quantity
        gain_loss = present_value - investment
        computed.append(
            ComputedHolding(
                **holding.model_dump(),
                investment=investment,
                present_value=present_value,
                gain_loss=gain_loss,
                return_percent=safe_percent(gain_loss, investment),
                portfolio_percent=safe_percent(investment, total_investment),
            )
        )
    return computed


def portfolio_totals(computed: Sequence[ComputedHolding]) -> dict[str, float]:
    total_investment = sum(h.investment for h in computed)
    total_value = sum(h.present_value for h in computed)
    total_gain = total_value - total_investment
    return {
        "total_investment": total_investment,
        "total_value": total_value,
        "total_gain": total_gain,
        "total_return": safe_percent(total_gain, total_investment),
    }
