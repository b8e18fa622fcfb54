"""reddit top posts.

One request per community; only the most upvoted post is kept.

Public API:
  - top_posts: fetch_listing, fetch_top_posts, rank_by_upvotes, top_post
  - models: Listing, RedditPost
"""

from tribune.datasources.reddit.client import REDDIT_BASE, listing_url
from tribune.datasources.reddit.models import Listing, RedditPost
from tribune.datasources.reddit.top_posts import (
    fetch_listing,
    fetch_top_posts,
    rank_by_upvotes,
    top_post,
)

__all__ = [
    "REDDIT_BASE",
    "Listing",
    "RedditPost",
    "fetch_listing",
    "fetch_top_posts",
    "listing_url",
    "rank_by_upvotes",
    "top_post",
]
