"""
Minecraft Wiki Integration

Wiki-style source on the Fandom MediaWiki API. Only the search endpoint is
used: the snippet of the first hit, with its highlight markup stripped,
becomes the summary.
"""

from __future__ import annotations

import logging
import re
import urllib.parse
from typing import Any

from aura_search.domain.entities import NormalizedResult, SourceType
from aura_search.infrastructure.sources.base_client import BaseSourceAdapter

logger = logging.getLogger(__name__)

MINECRAFT_WIKI_BASE = "https://minecraft.fandom.com"

# Characters encodeURIComponent leaves alone besides alphanumerics and "_.-"
_TITLE_SAFE_CHARS = "()!*'~"
_TAG_RE = re.compile(r"<[^>]*>")


def strip_markup(snippet: str) -> str:
    """Remove HTML tags such as ``<span class="searchmatch">``."""
    return _TAG_RE.sub("", snippet)


class MinecraftWikiClient(BaseSourceAdapter):
    """Minecraft Wiki full-text search."""

    _service_name = "MinecraftWiki"
    category = "Minecraft Wiki"
    source_type = SourceType.MINECRAFT

    def __init__(self, timeout: float = 30.0, **kwargs: Any):
        super().__init__(base_url=MINECRAFT_WIKI_BASE, timeout=timeout, min_interval=0.1, **kwargs)

    async def _search(self, query: str) -> list[NormalizedResult]:
        data = await self._make_request(
            "/api.php",
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

        hits = data["query"]["search"]
        if not hits:
            return []

        top = hits[0]
        summary = strip_markup(top["snippet"])
        if not summary.strip():
            return []

        page = urllib.parse.quote(top["title"], safe=_TITLE_SAFE_CHARS)
        return [
            NormalizedResult(
                title=top["title"],
                summary=summary,
                url=f"{MINECRAFT_WIKI_BASE}/wiki/{page}",
                source_type=SourceType.MINECRAFT,
            )
        ]
