"""Open-Meteo weather data source.

Fetches today's daily aggregates from Open-Meteo (free, no API key).

Public API:
  - forecast: fetch_forecast (one-day daily forecast)
  - models: WeatherForecast, DailyWeather, DayForecast
  - client: API URL, requested variables and units
"""

from tribune.datasources.weather.client import DAILY_VARS, OPEN_METEO_API
from tribune.datasources.weather.forecast import fetch_forecast
from tribune.datasources.weather.models import DailyWeather, DayForecast, WeatherForecast

__all__ = [
    "DAILY_VARS",
    "OPEN_METEO_API",
    "DailyWeather",
    "DayForecast",
    "WeatherForecast",
    "fetch_forecast",
]
