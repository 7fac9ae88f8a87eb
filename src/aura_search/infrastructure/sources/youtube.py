"""
YouTube Data API v3 Integration

Video-search source. The search endpoint only returns snippets, so view
counts and durations come from one batched ``videos`` call; when that call
fails the results are still emitted, just without those key points.

API Documentation: https://developers.google.com/youtube/v3/docs
"""

from __future__ import annotations

import logging
import re
from typing import Any

from aura_search.domain.entities import NormalizedResult, SourceType
from aura_search.infrastructure.sources.base_client import BaseSourceAdapter

logger = logging.getLogger(__name__)

YOUTUBE_API_BASE = "https://www.googleapis.com/youtube/v3"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch"
MAX_VIDEOS = 3
EMPTY_DESCRIPTION_SUMMARY = "Video on YouTube"

_ISO_DURATION_RE = re.compile(
    r"^P(?:(?P<days>\d+)D)?(?:T(?:(?P<hours>\d+)H)?(?:(?P<minutes>\d+)M)?(?:(?P<seconds>\d+)S)?)?$"
)


def format_duration(iso_duration: str) -> str | None:
    """
    Convert an ISO-8601 duration to a clock string.

    >>> format_duration("PT4M13S")
    '4:13'
    >>> format_duration("PT1H2M3S")
    '1:02:03'
    """
    match = _ISO_DURATION_RE.match(iso_duration or "")
    if not match or not any(match.groupdict().values()):
        return None

    parts = {k: int(v or 0) for k, v in match.groupdict().items()}
    hours = parts["days"] * 24 + parts["hours"]
    minutes, seconds = parts["minutes"], parts["seconds"]
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def _best_thumbnail(thumbnails: dict[str, Any]) -> str | None:
    for size in ("high", "medium", "default"):
        url = (thumbnails.get(size) or {}).get("url")
        if url:
            return url
    return None


class YouTubeClient(BaseSourceAdapter):
    """YouTube video search; inert without an API key."""

    _service_name = "YouTube"
    category = "YouTube Videos"
    source_type = SourceType.YOUTUBE

    def __init__(self, api_key: str | None = None, timeout: float = 30.0, **kwargs: Any):
        self._api_key = api_key
        super().__init__(base_url=YOUTUBE_API_BASE, timeout=timeout, min_interval=0.1, **kwargs)

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    async def get_video_details(self, video_ids: list[str]) -> dict[str, dict[str, Any]]:
        """Map video id -> {contentDetails, statistics}; empty on failure."""
        data = await self._make_request(
            "/videos",
            params={
                "part": "contentDetails,statistics",
                "id": ",".join(video_ids),
                "key": self._api_key,
            },
        )
        if not isinstance(data, dict):
            return {}
        return {item["id"]: item for item in data.get("items", []) if "id" in item}

    async def _search(self, query: str) -> list[NormalizedResult]:
        if not self.is_configured:
            logger.debug("YouTube: no API key configured, skipping")
            return []

        data = await self._make_request(
            "/search",
            params={
                "part": "snippet",
                "type": "video",
                "q": query,
                "maxResults": MAX_VIDEOS,
                "key": self._api_key,
            },
        )
        if not isinstance(data, dict):
            return []

        items = [item for item in data.get("items", []) if item.get("id", {}).get("videoId")][:MAX_VIDEOS]
        if not items:
            return []

        details = await self.get_video_details([item["id"]["videoId"] for item in items])
        results = []
        for item in items:
            video_id = item["id"]["videoId"]
            try:
                results.append(self._to_result(item, details.get(video_id, {})))
            except (KeyError, TypeError, ValueError) as e:
                logger.debug(f"YouTube: skipping malformed video {video_id!r}: {e!r}")
        return results

    @staticmethod
    def _to_result(item: dict[str, Any], detail: dict[str, Any]) -> NormalizedResult:
        video_id = item["id"]["videoId"]
        snippet = item["snippet"]

        key_points = []
        if snippet.get("channelTitle"):
            key_points.append(f"Uploaded by {snippet['channelTitle']}")
        view_count = (detail.get("statistics") or {}).get("viewCount")
        if view_count is not None:
            key_points.append(f"{int(view_count):,} views")
        duration = format_duration((detail.get("contentDetails") or {}).get("duration", ""))
        if duration:
            key_points.append(f"Duration: {duration}")

        return NormalizedResult(
            title=snippet["title"],
            summary=snippet.get("description") or EMPTY_DESCRIPTION_SUMMARY,
            key_points=tuple(key_points),
            thumbnail=_best_thumbnail(snippet.get("thumbnails") or {}),
            url=f"{YOUTUBE_WATCH_URL}?v={video_id}",
            source_type=SourceType.YOUTUBE,
        )
