"""
Prefect flow for fetching every source of an edition.

Sources are fetched one after another. Weather and reddit are mandatory;
stocks and news run only when their API key is configured. Any failure
raises an ``EditionError`` and ends the run.

Run locally:
    python -m tribune.flows.fetch
"""

from __future__ import annotations

from prefect import flow, task

from tribune.config import Settings, get_settings
from tribune.datasources import news, reddit, stocks
from tribune.datasources.news.models import Article
from tribune.datasources.reddit.models import RedditPost
from tribune.datasources.stocks.models import StockQuote
from tribune.datasources.weather import forecast as weather_forecast
from tribune.datasources.weather.models import WeatherForecast
from tribune.schemas import Edition


@task(name="fetch-weather")
def fetch_weather(lat: float, lon: float, timezone: str) -> WeatherForecast:
    """Fetch today's forecast from Open-Meteo."""
    return weather_forecast.fetch_forecast(lat, lon, timezone=timezone)


@task(name="fetch-stocks")
def fetch_stocks(symbols: tuple[str, ...], api_key: str) -> dict[str, StockQuote]:
    """Fetch a quote per symbol from Twelve Data."""
    return stocks.fetch_quotes(symbols, api_key)


@task(name="fetch-news")
def fetch_news(api_key: str) -> list[Article]:
    """Fetch the NYT most viewed list."""
    return news.fetch_most_viewed(api_key)


@task(name="fetch-reddit")
def fetch_reddit(communities: tuple[str, ...]) -> dict[str, RedditPost]:
    """Fetch the top post of each community."""
    return reddit.fetch_top_posts(communities)


@flow(name="fetch-edition", log_prints=True)
def fetch_edition(settings: Settings | None = None) -> Edition:
    """
    Fetch all sources for today's edition.

    Args:
        settings: Run configuration (defaults to ``get_settings()``).

    Returns:
        Edition with empty ``quotes``/``articles`` for skipped optional sources.
    """
    settings = settings or get_settings()

    print("Fetching weather data...")
    weather = fetch_weather(settings.latitude, settings.longitude, settings.timezone)

    quotes: dict[str, StockQuote] = {}
    if settings.stocks_api_key:
        print("Fetching stock ticker data...")
        quotes = fetch_stocks(settings.stocks, settings.stocks_api_key)

    articles: list[Article] = []
    if settings.news_api_key:
        print("Fetching news headlines data...")
        articles = fetch_news(settings.news_api_key)

    print("Fetching reddit top posts data...")
    top_posts = fetch_reddit(settings.subreddits)

    return Edition(weather=weather, quotes=quotes, articles=articles, top_posts=top_posts)


if __name__ == "__main__":
    edition = fetch_edition()
    print(f"Flow complete: {len(edition.quotes)} quotes, {len(edition.articles)} articles")
