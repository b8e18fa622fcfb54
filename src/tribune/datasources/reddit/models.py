"""reddit listing response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RedditPost(BaseModel):
    """The fields of a ``t3`` post we print."""

    title: str
    ups: int
    subreddit: str | None = None
    permalink: str | None = None


class Child(BaseModel):
    """Listing entry wrapper: ``{"kind": "t3", "data": {...}}``."""

    kind: str | None = None
    data: RedditPost


class ListingData(BaseModel):
    children: list[Child] = Field(default_factory=list)


class Listing(BaseModel):
    """Top-level ``/r/{name}.json`` response."""

    kind: str | None = None
    data: ListingData

    @property
    def posts(self) -> list[RedditPost]:
        """Posts in the order reddit returned them."""
        return [child.data for child in self.data.children]
