"""reddit section renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tribune.datasources.reddit.models import RedditPost


def build_reddit_text(top_posts: dict[str, RedditPost]) -> str:
    """One line per community: name, top post title and its upvotes."""
    lines = ["REDDIT\n\n"]
    for community, post in top_posts.items():
        lines.append(f"  r/{community} - {post.title} (Upvotes: {post.ups})\n\n")
    return "".join(lines)
