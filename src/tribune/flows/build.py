"""
Prefect flow that assembles the report and sends it to the printer.

Run locally:
    python -m tribune.flows.build
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from prefect import flow, task

from tribune.config import Settings, get_settings
from tribune.flows.fetch import fetch_edition
from tribune.renderers.headlines import MAX_HEADLINES, build_headlines_text
from tribune.renderers.markets import build_markets_text
from tribune.renderers.masthead import DEFAULT_TITLE, build_footer, build_header
from tribune.renderers.reddit import build_reddit_text
from tribune.renderers.weather import build_weather_text
from tribune.services.printer import send_to_printer

if TYPE_CHECKING:
    from tribune.schemas import Edition


def build_report(
    edition: Edition,
    day: date,
    *,
    title: str = DEFAULT_TITLE,
    max_news: int = MAX_HEADLINES,
) -> str:
    """
    Concatenate the sections in page order.

    Markets and headlines only appear when their source was fetched. Every
    section except the footer gets one more newline, which puts a blank
    line between sections.
    """
    sections = [build_header(day, title), build_weather_text(edition.weather)]
    if edition.has_markets:
        sections.append(build_markets_text(edition.quotes))
    if edition.has_headlines:
        sections.append(build_headlines_text(edition.articles, max_news))
    sections.append(build_reddit_text(edition.top_posts))

    return "".join(section + "\n" for section in sections) + build_footer(day, title)


@task(name="print-report")
def print_report(report: str, printer: str, command: str) -> str:
    """Send the report to the printer."""
    return send_to_printer(report, printer, command)


@flow(name="publish-edition", log_prints=True)
def publish_edition(
    settings: Settings | None = None,
    *,
    day: date | None = None,
    dry_run: bool = False,
) -> str:
    """
    Fetch, assemble and print today's edition.

    Args:
        settings: Run configuration (defaults to ``get_settings()``).
        day: Date for the masthead (defaults to today).
        dry_run: Build the report but skip the printer.

    Returns:
        The report text.
    """
    settings = settings or get_settings()
    day = day or date.today()

    edition = fetch_edition(settings)
    report = build_report(edition, day, title=settings.title, max_news=settings.max_news)

    if dry_run:
        return report

    print("Writing to printer...")
    print_report(report, settings.printer_name, settings.print_command)
    return report


if __name__ == "__main__":
    publish_edition()
