"""Shared fixtures: canned API payloads shaped like the real responses."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import Mock

import pytest

from tribune.config import Settings

if TYPE_CHECKING:
    from collections.abc import Callable


def _response(payload: Any) -> Mock:
    resp = Mock()
    resp.raise_for_status = Mock()
    resp.json.return_value = payload
    return resp


def _listing(*posts: tuple[str, int]) -> dict[str, Any]:
    return {
        "kind": "Listing",
        "data": {
            "children": [
                {"kind": "t3", "data": {"title": title, "ups": ups}} for title, ups in posts
            ]
        },
    }


@pytest.fixture
def make_response() -> Callable[[Any], Mock]:
    """Factory for ``requests.Response`` stand-ins whose ``json()`` returns the payload."""
    return _response


@pytest.fixture
def listing_payload() -> Callable[..., dict[str, Any]]:
    """Factory for a reddit listing with ``(title, ups)`` posts in the given order."""
    return _listing


@pytest.fixture
def weather_payload() -> dict[str, Any]:
    return {
        "latitude": 28.54,
        "longitude": -81.38,
        "timezone": "America/New_York",
        "daily": {
            "time": ["2026-10-17"],
            "weather_code": [2],
            "temperature_2m_max": [86.24],
            "temperature_2m_min": [71.36],
            "sunrise": ["2026-10-17T07:24"],
            "sunset": ["2026-10-17T18:54"],
            "daylight_duration": [41400.0],
            "wind_speed_10m_max": [11.3],
        },
    }


@pytest.fixture
def quote_payloads() -> dict[str, dict[str, Any]]:
    return {
        "DIA": {
            "symbol": "DIA",
            "name": "SPDR Dow Jones Industrial Average ETF",
            "close": "423.10001",
            "percent_change": "0.35412",
        },
        "SPY": {
            "symbol": "SPY",
            "name": "SPDR S&P 500 ETF Trust",
            "close": "575.5",
            "percent_change": "-1.2",
        },
    }


@pytest.fixture
def news_payload() -> dict[str, Any]:
    return {
        "status": "OK",
        "num_results": 4,
        "results": [
            {"title": "First headline", "section": "U.S."},
            {"title": "Second headline", "section": "World"},
            {"title": "Third headline", "section": "Business"},
            {"title": "Fourth headline", "section": "Arts"},
        ],
    }


@pytest.fixture
def settings() -> Settings:
    return Settings(
        stocks_api_key="stock-key",
        news_api_key="news-key",
        subreddits=("science", "technology"),
    )


@pytest.fixture
def keyless_settings() -> Settings:
    return Settings(stocks_api_key=None, news_api_key=None, subreddits=("science",))
