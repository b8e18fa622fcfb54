"""Pure rendering functions: structured data -> fixed-width text blocks.

All renderers follow the same pattern:
  - Input: pydantic models from ``datasources`` (or plain values)
  - Output: str, one section of the report, ending with a blank line
  - No side effects, no I/O, no Prefect decorators

Used by flows/build.py which concatenates the sections.

Public API:
  - masthead: build_header, build_footer, format_masthead_date
  - weather: build_weather_text
  - markets: build_markets_text
  - headlines: build_headlines_text
  - reddit: build_reddit_text
  - weather_utils: WMO_CONDITIONS, wmo_code_to_conditions
"""

from __future__ import annotations

#: Printable columns on the receipt paper.
PAGE_WIDTH = 78


def rule(width: int = PAGE_WIDTH) -> str:
    """A full-width line of dashes."""
    return "-" * width
