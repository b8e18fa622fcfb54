"""Open-Meteo daily forecast response models."""

from __future__ import annotations

from datetime import date
from typing import TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def _at(values: list[T], index: int) -> T | None:
    return values[index] if index < len(values) else None


class DayForecast(BaseModel):
    """One day pulled out of the columnar ``daily`` block."""

    date: date
    weather_code: int
    temp_max: float
    temp_min: float
    sunrise: str | None = None
    sunset: str | None = None
    daylight_seconds: float | None = None
    wind_speed_max: float | None = None

    @property
    def daylight_hours(self) -> float | None:
        """Daylight duration in hours."""
        if self.daylight_seconds is None:
            return None
        return self.daylight_seconds / 3600


class DailyWeather(BaseModel):
    """The ``daily`` block: one array per requested variable, indexed by day."""

    time: list[date] = Field(..., min_length=1)
    weather_code: list[int] = Field(..., min_length=1)
    temperature_2m_max: list[float] = Field(..., min_length=1)
    temperature_2m_min: list[float] = Field(..., min_length=1)
    sunrise: list[str] = Field(default_factory=list)
    sunset: list[str] = Field(default_factory=list)
    daylight_duration: list[float] = Field(default_factory=list)
    wind_speed_10m_max: list[float] = Field(default_factory=list)

    def day(self, index: int = 0) -> DayForecast:
        """Row ``index`` across all arrays; optional arrays may be short."""
        return DayForecast(
            date=self.time[index],
            weather_code=self.weather_code[index],
            temp_max=self.temperature_2m_max[index],
            temp_min=self.temperature_2m_min[index],
            sunrise=_at(self.sunrise, index),
            sunset=_at(self.sunset, index),
            daylight_seconds=_at(self.daylight_duration, index),
            wind_speed_max=_at(self.wind_speed_10m_max, index),
        )


class WeatherForecast(BaseModel):
    """Top-level Open-Meteo forecast response (only the parts we read)."""

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    daily: DailyWeather

    @property
    def today(self) -> DayForecast:
        """First (and, with ``forecast_days=1``, only) forecast day."""
        return self.daily.day(0)
