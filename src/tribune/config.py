"""
Application settings.

Defaults are compiled in and can be overridden with ``TRIBUNE_*`` environment
variables (``TRIBUNE_PRINTER_NAME=...``). The API keys are read from
``STOCKS_API_KEY`` and ``NEWS_API_KEY``; blank means unset. There is no
settings file.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Immutable run configuration, built once and passed to every stage."""

    model_config = SettingsConfigDict(
        env_prefix="TRIBUNE_",
        env_file=None,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    title: str = "SCHMELYUN TRIBUNE"

    # Orlando, FL
    latitude: float = Field(default=28.5383, ge=-90, le=90)
    longitude: float = Field(default=-81.3792, ge=-180, le=180)
    timezone: str = "America/New_York"

    stocks: tuple[str, ...] = ("DIA", "SPY")
    subreddits: tuple[str, ...] = (
        "science",
        "upliftingnews",
        "technology",
        "fauxmoi",
        "todayilearned",
    )
    max_news: int = Field(default=3, ge=0)

    printer_name: str = "Canon_TS3500_series"
    print_command: str = "lp"

    stocks_api_key: str | None = Field(
        default=None, repr=False, exclude=True, validation_alias="STOCKS_API_KEY"
    )
    news_api_key: str | None = Field(
        default=None, repr=False, exclude=True, validation_alias="NEWS_API_KEY"
    )

    @field_validator("stocks_api_key", "news_api_key", mode="before")
    @classmethod
    def blank_is_unset(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
