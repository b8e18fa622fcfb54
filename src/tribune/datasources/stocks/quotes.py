"""Latest quotes from the Twelve Data API."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tribune.datasources.stocks.client import QUOTE_API
from tribune.datasources.stocks.models import StockQuote
from tribune.datasources.validation import decode, require_json
from tribune.errors import FetchError

if TYPE_CHECKING:
    from collections.abc import Iterable


def fetch_quote(symbol: str, api_key: str) -> StockQuote:
    """
    Fetch the latest quote for ``symbol``.

    Raises:
        FetchError: Transport failure, or Twelve Data answered with an error body.
        DecodeError: Price fields missing or not numeric.
    """
    source = f"stock ({symbol})"
    data = require_json(source, QUOTE_API, {"symbol": symbol, "apikey": api_key})
    # Errors come back as HTTP 200 with {"status": "error", "code": ..., "message": ...}
    if data.get("status") == "error":
        raise FetchError(source, str(data.get("message", "API error")))
    return decode(StockQuote, data, source)


def fetch_quotes(symbols: Iterable[str], api_key: str) -> dict[str, StockQuote]:
    """Fetch every symbol in order; the first failure aborts the lot."""
    return {symbol: fetch_quote(symbol, api_key) for symbol in symbols}
