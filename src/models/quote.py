from __future__ import annotations

from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator


def _finite_or_none(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        out = float(value)
    except (TypeError, ValueError):
        return None
    if np.isnan(out) or np.isinf(out):
        return None
    return out


class LiveQuote(BaseModel):
    """One record from a quote provider; any field but ``symbol`` may be missing."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    symbol: str
    cmp: float | None = None
    pe_ratio: float | None = Field(default=None, alias="peRatio")
    earnings: str | None = None

    @field_validator("symbol", mode="before")
    @classmethod
    def _clean_symbol(cls, value: Any) -> str:
        return str(value or "").strip().upper()

    @field_validator("cmp", "pe_ratio", mode="before")
    @classmethod
    def _clean_number(cls, value: Any) -> float | None:
        return _finite_or_none(value)

    @field_validator("earnings", mode="before")
    @classmethod
    def _clean_earnings(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        return text or None
