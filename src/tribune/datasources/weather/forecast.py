"""Today's forecast from the Open-Meteo Forecast API."""

from __future__ import annotations

from typing import Any

from tribune.datasources.validation import decode, require_json
from tribune.datasources.weather.client import DAILY_VARS, OPEN_METEO_API, UNITS
from tribune.datasources.weather.models import WeatherForecast


def build_params(
    lat: float,
    lon: float,
    timezone: str = "America/New_York",
    forecast_days: int = 1,
) -> dict[str, Any]:
    """Query string for a daily forecast in imperial units."""
    return {
        "latitude": lat,
        "longitude": lon,
        "daily": ",".join(DAILY_VARS),
        **UNITS,
        "timezone": timezone,
        "forecast_days": forecast_days,
    }


def fetch_forecast(
    lat: float = 28.5383,
    lon: float = -81.3792,
    *,
    timezone: str = "America/New_York",
) -> WeatherForecast:
    """
    Fetch one day of daily aggregates from Open-Meteo.

    Args:
        lat: Latitude (default: Orlando, FL).
        lon: Longitude.
        timezone: Timezone the daily buckets are computed in.

    Returns:
        Validated forecast; ``.today`` holds the row we print.

    Raises:
        FetchError: The request or JSON decode failed.
        DecodeError: The body is missing daily fields.
    """
    data = require_json("weather", OPEN_METEO_API, build_params(lat, lon, timezone))
    return decode(WeatherForecast, data, "weather")
