"""Masthead lines printed at the top and bottom of the page."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tribune.renderers import rule

if TYPE_CHECKING:
    from datetime import date

DEFAULT_TITLE = "SCHMELYUN TRIBUNE"
TITLE_GAP = 20


def format_masthead_date(day: date) -> str:
    """E.g. ``Sat Oct 17 2026`` (unpadded day of month)."""
    return f"{day:%a %b} {day.day} {day:%Y}"


def _title_line(day: date, title: str) -> str:
    return f"{title}{' ' * TITLE_GAP}{format_masthead_date(day)}\n"


def build_header(day: date, title: str = DEFAULT_TITLE) -> str:
    """Title and date, then a rule."""
    return _title_line(day, title) + rule() + "\n"


def build_footer(day: date, title: str = DEFAULT_TITLE) -> str:
    """A rule, then title and date."""
    return rule() + "\n" + _title_line(day, title)
