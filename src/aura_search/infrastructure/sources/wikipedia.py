"""
Wikipedia Integration

Encyclopedia source: the most authoritative provider for free-text factual
questions, so its summary seeds the unified answer whenever it has one.

APIs:
- MediaWiki Action API (list=search) to find the best matching page
- REST v1 page summary for the extract, thumbnail and canonical URL
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import Any

from aura_search.domain.entities import NormalizedResult, SourceType
from aura_search.infrastructure.sources.base_client import BaseSourceAdapter

logger = logging.getLogger(__name__)

WIKIPEDIA_API_URL = "https://en.wikipedia.org/w/api.php"
WIKIPEDIA_SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary"


class WikipediaClient(BaseSourceAdapter):
    """
    Wikipedia search + page summary.

    Usage:
        async with WikipediaClient() as client:
            results = await client.search("alan turing")
    """

    _service_name = "Wikipedia"
    category = "Wikipedia Summary"
    source_type = SourceType.WIKIPEDIA

    def __init__(self, timeout: float = 30.0, **kwargs: Any):
        super().__init__(timeout=timeout, min_interval=0.1, **kwargs)

    async def search_titles(self, query: str) -> list[dict[str, Any]]:
        """Full-text search; returns raw search hits (title, snippet, pageid)."""
        data = await self._make_request(
            WIKIPEDIA_API_URL,
            params={
                "action": "query",
                "list": "search",
                "srsearch": query,
                "format": "json",
                "origin": "*",
            },
        )
        if not isinstance(data, dict):
            return []
        return data["query"]["search"]

    async def get_summary(self, title: str) -> dict[str, Any] | None:
        """Fetch the REST page summary for an exact title."""
        url = f"{WIKIPEDIA_SUMMARY_URL}/{urllib.parse.quote(title, safe='')}"
        data = await self._make_request(url)
        return data if isinstance(data, dict) else None

    async def _search(self, query: str) -> list[NormalizedResult]:
        hits = await self.search_titles(query)
        if not hits:
            return []

        summary = await self.get_summary(hits[0]["title"])
        if summary is None:
            return []

        return [
            NormalizedResult(
                title=summary["title"],
                summary=summary["extract"],
                thumbnail=(summary.get("thumbnail") or {}).get("source"),
                url=summary["content_urls"]["desktop"]["page"],
                source_type=SourceType.WIKIPEDIA,
            )
        ]
