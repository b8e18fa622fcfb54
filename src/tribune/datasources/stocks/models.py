"""Twelve Data quote response model."""

from __future__ import annotations

from pydantic import BaseModel


class StockQuote(BaseModel):
    """Latest quote for one symbol.

    Twelve Data sends prices as JSON strings; pydantic coerces them to float.
    """

    symbol: str
    name: str | None = None
    close: float
    percent_change: float
