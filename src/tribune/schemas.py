"""
Domain models for the paper.

Per-source response models live next to their fetchers in ``datasources``;
this module holds the bundle a single run hands from fetching to rendering.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from tribune.datasources.news.models import Article
from tribune.datasources.reddit.models import RedditPost
from tribune.datasources.stocks.models import StockQuote
from tribune.datasources.weather.models import WeatherForecast


class Edition(BaseModel):
    """Everything fetched for one edition.

    ``quotes`` and ``top_posts`` keep configuration order. Empty ``quotes``
    or ``articles`` means the optional source was skipped.
    """

    model_config = {"frozen": True}

    weather: WeatherForecast
    quotes: dict[str, StockQuote] = Field(default_factory=dict)
    articles: list[Article] = Field(default_factory=list)
    top_posts: dict[str, RedditPost] = Field(default_factory=dict)

    @property
    def has_markets(self) -> bool:
        return bool(self.quotes)

    @property
    def has_headlines(self) -> bool:
        return bool(self.articles)
