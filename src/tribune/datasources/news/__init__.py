"""New York Times most viewed headlines.

Optional source: only fetched when ``NEWS_API_KEY`` is set.

Public API:
  - most_viewed: fetch_most_viewed
  - models: Article, MostViewed
"""

from tribune.datasources.news.client import MOST_VIEWED_API
from tribune.datasources.news.models import Article, MostViewed
from tribune.datasources.news.most_viewed import fetch_most_viewed

__all__ = [
    "MOST_VIEWED_API",
    "Article",
    "MostViewed",
    "fetch_most_viewed",
]
