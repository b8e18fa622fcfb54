"""Weather section renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tribune.renderers.weather_utils import wmo_code_to_conditions

if TYPE_CHECKING:
    from tribune.datasources.weather.models import WeatherForecast


def build_weather_text(forecast: WeatherForecast) -> str:
    """Condition plus high/low for today, one decimal place."""
    today = forecast.today
    conditions = wmo_code_to_conditions(today.weather_code)
    return (
        "WEATHER\n"
        f"    {conditions} - High: {today.temp_max:.1f}°F, Low: {today.temp_min:.1f}°F\n"
        "\n"
    )
