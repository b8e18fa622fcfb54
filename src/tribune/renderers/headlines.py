"""Headlines section renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tribune.datasources.news.models import Article

MAX_HEADLINES = 3


def build_headlines_text(articles: list[Article], limit: int = MAX_HEADLINES) -> str:
    """The first ``limit`` titles in ranking order; fewer if fewer came back."""
    lines = ["HEADLINES\n\n"]
    lines.extend(f"  {article.title}\n\n" for article in articles[:limit])
    return "".join(lines)
