"""Tests for YouTubeClient."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from aura_search.domain.entities import SourceType
from aura_search.infrastructure.sources.youtube import (
    EMPTY_DESCRIPTION_SUMMARY,
    YouTubeClient,
    format_duration,
)

SEARCH_RESPONSE = {
    "items": [
        {
            "id": {"kind": "youtube#video", "videoId": "abc123"},
            "snippet": {
                "title": "Redstone basics",
                "description": "Learn redstone in ten minutes.",
                "channelTitle": "CraftGuide",
                "thumbnails": {
                    "default": {"url": "https://i.ytimg.com/default.jpg"},
                    "high": {"url": "https://i.ytimg.com/high.jpg"},
                },
            },
        },
        {
            "id": {"kind": "youtube#video", "videoId": "def456"},
            "snippet": {"title": "Redstone 2", "description": "", "thumbnails": {}},
        },
    ]
}

DETAILS_RESPONSE = {
    "items": [
        {
            "id": "abc123",
            "contentDetails": {"duration": "PT10M5S"},
            "statistics": {"viewCount": "1234567"},
        }
    ]
}


@pytest.fixture
def client():
    c = YouTubeClient(api_key="yt-key")
    c._min_interval = 0
    return c


class TestFormatDuration:
    @pytest.mark.parametrize(
        ("iso", "expected"),
        [
            ("PT4M13S", "4:13"),
            ("PT1H2M3S", "1:02:03"),
            ("PT45S", "0:45"),
            ("P1DT1H", "25:00:00"),
            ("", None),
            ("P", None),
            ("4 minutes", None),
        ],
    )
    def test_format(self, iso, expected):
        assert format_duration(iso) == expected


class TestSearch:
    @patch.object(YouTubeClient, "_make_request")
    async def test_results_with_details(self, mock_req, client):
        mock_req.side_effect = [SEARCH_RESPONSE, DETAILS_RESPONSE]

        results = await client.search("redstone")

        assert len(results) == 2
        first, second = results
        assert first.title == "Redstone basics"
        assert first.summary == "Learn redstone in ten minutes."
        assert first.key_points == ("Uploaded by CraftGuide", "1,234,567 views", "Duration: 10:05")
        assert first.thumbnail == "https://i.ytimg.com/high.jpg"
        assert first.url == "https://www.youtube.com/watch?v=abc123"
        assert first.source_type is SourceType.YOUTUBE

        assert second.summary == EMPTY_DESCRIPTION_SUMMARY
        assert second.key_points == ()
        assert second.thumbnail is None

    @patch.object(YouTubeClient, "_make_request")
    async def test_details_batched(self, mock_req, client):
        mock_req.side_effect = [SEARCH_RESPONSE, {"items": []}]
        await client.search("redstone")

        search_call, details_call = mock_req.call_args_list
        assert search_call.args[0] == "/search"
        assert search_call.kwargs["params"]["q"] == "redstone"
        assert search_call.kwargs["params"]["type"] == "video"
        assert details_call.args[0] == "/videos"
        assert details_call.kwargs["params"]["id"] == "abc123,def456"

    @patch.object(YouTubeClient, "_make_request")
    async def test_details_failure_still_emits(self, mock_req, client):
        mock_req.side_effect = [SEARCH_RESPONSE, None]
        results = await client.search("redstone")
        assert results[0].key_points == ("Uploaded by CraftGuide",)

    @patch.object(YouTubeClient, "_make_request")
    async def test_no_videos(self, mock_req, client):
        mock_req.return_value = {"items": []}
        assert await client.search("qwzxv") == []
        assert mock_req.call_count == 1

    @patch.object(YouTubeClient, "_make_request")
    async def test_unconfigured_is_inert(self, mock_req):
        client = YouTubeClient()
        assert not client.is_configured
        assert await client.search("redstone") == []
        mock_req.assert_not_called()

    @patch.object(YouTubeClient, "_make_request")
    async def test_malformed_video_skipped(self, mock_req, client):
        details = {
            "items": [
                {"id": "abc123", "statistics": {"viewCount": "n/a"}},
                {"id": "def456", "statistics": {"viewCount": "42"}},
            ]
        }
        mock_req.side_effect = [SEARCH_RESPONSE, details]

        results = await client.search("redstone")

        assert len(results) == 1
        assert results[0].title == "Redstone 2"
        assert results[0].key_points == ("42 views",)
