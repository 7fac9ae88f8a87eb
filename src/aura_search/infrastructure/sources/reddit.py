"""
Reddit Integration

Forum source. Threads rarely carry a clean factual statement, so the key
points are synthesized from engagement counters and the originating
community instead of being copied from the post body.
"""

from __future__ import annotations

import logging
from typing import Any

from aura_search.domain.entities import NormalizedResult, SourceType
from aura_search.infrastructure.sources.base_client import BaseSourceAdapter

logger = logging.getLogger(__name__)

REDDIT_BASE_URL = "https://www.reddit.com"
MAX_THREADS = 3
EMPTY_SELFTEXT_SUMMARY = "Discussion thread on Reddit"


class RedditClient(BaseSourceAdapter):
    """Reddit public search (``/search.json``)."""

    _service_name = "Reddit"
    category = "Reddit Discussions"
    source_type = SourceType.REDDIT

    def __init__(self, timeout: float = 30.0, **kwargs: Any):
        super().__init__(base_url=REDDIT_BASE_URL, timeout=timeout, min_interval=0.5, **kwargs)

    async def _search(self, query: str) -> list[NormalizedResult]:
        data = await self._make_request(
            "/search.json",
            params={"q": query, "limit": MAX_THREADS},
        )
        if not isinstance(data, dict):
            return []

        results = []
        for post in data["data"]["children"][:MAX_THREADS]:
            try:
                results.append(self._to_result(post["data"]))
            except (KeyError, TypeError, ValueError) as e:
                logger.debug(f"Reddit: skipping malformed post: {e!r}")
        return results

    @staticmethod
    def _to_result(post: dict[str, Any]) -> NormalizedResult:
        thumbnail = post.get("thumbnail")
        if not (isinstance(thumbnail, str) and thumbnail.startswith("http")):
            # Reddit uses "self", "default", "nsfw" etc. as thumbnail markers
            thumbnail = None

        return NormalizedResult(
            title=post["title"],
            summary=post.get("selftext") or EMPTY_SELFTEXT_SUMMARY,
            key_points=(
                f"{post.get('ups', 0)} upvotes",
                f"{post.get('num_comments', 0)} comments",
                f"r/{post['subreddit']}",
            ),
            thumbnail=thumbnail,
            url=f"{REDDIT_BASE_URL}{post['permalink']}",
            source_type=SourceType.REDDIT,
        )
