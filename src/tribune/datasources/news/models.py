"""NYT Most Popular response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Article(BaseModel):
    """A single most-viewed article."""

    title: str
    url: str | None = None
    section: str | None = None
    published_date: str | None = None


class MostViewed(BaseModel):
    """Top-level response; ``results`` is already ranked by views."""

    status: str | None = None
    num_results: int | None = None
    results: list[Article] = Field(default_factory=list)
