"""Most upvoted post per community from reddit's public JSON listings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tribune.datasources.reddit.client import listing_url
from tribune.datasources.reddit.models import Listing, RedditPost
from tribune.datasources.validation import decode, require_json
from tribune.errors import EmptyResultError

if TYPE_CHECKING:
    from collections.abc import Iterable


def fetch_listing(community: str) -> Listing:
    """
    Fetch the front listing of ``r/{community}``.

    Raises:
        FetchError: The request or JSON decode failed.
        DecodeError: The body is not a post listing.
    """
    source = f"reddit (r/{community})"
    data = require_json(source, listing_url(community))
    return decode(Listing, data, source)


def rank_by_upvotes(posts: list[RedditPost]) -> list[RedditPost]:
    """Sort posts by upvotes, highest first. Ties keep their listing order."""
    # sorted() is stable, and stays stable with reverse=True
    return sorted(posts, key=lambda p: p.ups, reverse=True)


def top_post(listing: Listing, community: str = "") -> RedditPost:
    """The single most upvoted post in ``listing``."""
    ranked = rank_by_upvotes(listing.posts)
    if not ranked:
        source = f"reddit (r/{community})"
        msg = "listing has no posts"
        raise EmptyResultError(source, msg)
    return ranked[0]


def fetch_top_posts(communities: Iterable[str]) -> dict[str, RedditPost]:
    """Top post for each community, in the order given."""
    return {name: top_post(fetch_listing(name), name) for name in communities}
