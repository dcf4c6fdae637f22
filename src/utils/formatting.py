from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

PERCENT_SENTINEL = 0.0
_CENTS = Decimal("0.01")


def round_half_up(value: float) -> float:
    # ties go away from zero: 0.125 -> 0.13, -0.125 -> -0.13
    return float(Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def safe_percent(numerator: float, denominator: float) -> float:
    """Return numerator/denominator*100 rounded to 2 dp, or the 0.0 sentinel.

    A zero (or non-finite) denominator yields PERCENT_SENTINEL so that NaN and
    infinity never reach the rendered table.
    """
    if not denominator or not math.isfinite(denominator):
        return PERCENT_SENTINEL
    value = (numerator / denominator) * 100
    if not math.isfinite(value):
        return PERCENT_SENTINEL
    # quantize can hand back -0.0 for tiny negative values
    return round_half_up(value) + 0.0


def format_percent(value: float) -> str:
    if not math.isfinite(value):
        value = PERCENT_SENTINEL
    text = f"{value:.2f}"
    if text == "-0.00":
        return "0.00"
    return text


def format_signed_percent(value: float) -> str:
    text = format_percent(value)
    if text.startswith("-"):
        return text
    return f"+{text}"


def format_amount(value: float) -> str:
    if not math.isfinite(value):
        return "0"
    rounded = round(value, 2)
    if rounded == int(rounded):
        return f"{int(rounded):,}"
    return f"{rounded:,.2f}".rstrip("0").rstrip(".")


def format_inr(value: float, absolute: bool = False) -> str:
    if absolute:
        value = abs(value)
    return f"₹{format_amount(value)}"


def percent_bar_width(percent: float) -> float:
    if not math.isfinite(percent) or percent <= 0:
        return 0.0
    return min(percent * 2, 100.0)
