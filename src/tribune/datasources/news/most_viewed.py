"""Most viewed articles from the NYT Most Popular API."""

from __future__ import annotations

from tribune.datasources.news.client import MOST_VIEWED_API
from tribune.datasources.news.models import Article, MostViewed
from tribune.datasources.validation import decode, require_json
from tribune.errors import EmptyResultError


def fetch_most_viewed(api_key: str) -> list[Article]:
    """
    Fetch yesterday's most viewed articles, in ranking order.

    Raises:
        FetchError: The request or JSON decode failed.
        DecodeError: ``results`` is malformed.
        EmptyResultError: ``results`` is empty.
    """
    source = "news"
    data = require_json(source, MOST_VIEWED_API, {"api-key": api_key})
    response = decode(MostViewed, data, source)
    if not response.results:
        msg = "no results"
        raise EmptyResultError(source, msg)
    return response.results
