"""reddit public listing endpoints (no auth, but a real User-Agent is required)."""

REDDIT_BASE = "https://reddit.com"


def listing_url(community: str) -> str:
    """Hot listing for ``r/{community}`` as JSON."""
    return f"{REDDIT_BASE}/r/{community}.json"
