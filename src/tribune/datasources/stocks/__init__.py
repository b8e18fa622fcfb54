"""Twelve Data stock quotes.

Optional source: only fetched when ``STOCKS_API_KEY`` is set.

Public API:
  - quotes: fetch_quote, fetch_quotes
  - models: StockQuote
"""

from tribune.datasources.stocks.client import QUOTE_API
from tribune.datasources.stocks.models import StockQuote
from tribune.datasources.stocks.quotes import fetch_quote, fetch_quotes

__all__ = [
    "QUOTE_API",
    "StockQuote",
    "fetch_quote",
    "fetch_quotes",
]
