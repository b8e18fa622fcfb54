"""Markets section renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tribune.datasources.stocks.models import StockQuote


def build_markets_text(quotes: dict[str, StockQuote]) -> str:
    """One line per ticker with close and percent change, in the order given."""
    lines = ["MARKETS\n\n"]
    for symbol, quote in quotes.items():
        lines.append(f"  {symbol}: {quote.close:.2f} ({quote.percent_change:.2f}%)\n\n")
    return "".join(lines)
