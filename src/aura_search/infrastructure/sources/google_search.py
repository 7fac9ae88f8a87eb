"""
Google Custom Search Integration

Web-search source. Requires an API key and a search engine ID (cx); without
both the client is inert and contributes nothing.

API Documentation: https://developers.google.com/custom-search/v1/reference/rest/v1/cse/list
"""

from __future__ import annotations

import logging
from typing import Any

from aura_search.domain.entities import NormalizedResult, SourceType
from aura_search.infrastructure.sources.base_client import BaseSourceAdapter

logger = logging.getLogger(__name__)

GOOGLE_CSE_URL = "https://www.googleapis.com/customsearch/v1"
DEFAULT_MAX_RESULTS = 10


class GoogleSearchClient(BaseSourceAdapter):
    """
    Google Custom Search JSON API.

    Items carry no structured signal, so every result has an empty
    key-point list.
    """

    _service_name = "Google"
    category = "Google Results"
    source_type = SourceType.GOOGLE

    def __init__(
        self,
        api_key: str | None = None,
        cx: str | None = None,
        max_results: int = DEFAULT_MAX_RESULTS,
        timeout: float = 30.0,
        **kwargs: Any,
    ):
        """
        Args:
            api_key: Google API key
            cx: Programmable Search Engine ID
            max_results: Upper bound on emitted results (API returns at most 10)
            timeout: Request timeout in seconds
        """
        self._api_key = api_key
        self._cx = cx
        self._max_results = max_results
        super().__init__(timeout=timeout, min_interval=0.1, **kwargs)

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key and self._cx)

    async def _search(self, query: str) -> list[NormalizedResult]:
        if not self.is_configured:
            logger.debug("Google: no API key / cx configured, skipping")
            return []

        data = await self._make_request(
            GOOGLE_CSE_URL,
            params={"key": self._api_key, "cx": self._cx, "q": query},
        )
        if not isinstance(data, dict):
            return []

        results = []
        for item in (data.get("items") or [])[: self._max_results]:
            if not (item.get("title") and item.get("snippet") and item.get("link")):
                logger.debug(f"Google: skipping incomplete item {item.get('link')!r}")
                continue
            results.append(
                NormalizedResult(
                    title=item["title"],
                    summary=item["snippet"],
                    key_points=(),
                    url=item["link"],
                    source_type=SourceType.GOOGLE,
                )
            )
        return results
