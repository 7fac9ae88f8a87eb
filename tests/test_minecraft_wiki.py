"""Tests for MinecraftWikiClient."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from aura_search.domain.entities import SourceType
from aura_search.infrastructure.sources.minecraft_wiki import MinecraftWikiClient, strip_markup


@pytest.fixture
def client():
    c = MinecraftWikiClient()
    c._min_interval = 0
    return c


class TestStripMarkup:
    def test_removes_tags(self):
        snippet = 'A <span class="searchmatch">Creeper</span> is a hostile mob'
        assert strip_markup(snippet) == "A Creeper is a hostile mob"

    def test_only_tags(self):
        assert strip_markup("<b></b>") == ""


class TestSearch:
    @patch.object(MinecraftWikiClient, "_make_request")
    async def test_first_hit(self, mock_req, client):
        mock_req.return_value = {
            "query": {
                "search": [
                    {"title": "Redstone Repeater", "snippet": 'A <span class="searchmatch">repeater</span> delays signals'},
                    {"title": "Comparator", "snippet": "Other"},
                ]
            }
        }

        results = await client.search("repeater")

        assert len(results) == 1
        result = results[0]
        assert result.title == "Redstone Repeater"
        assert result.summary == "A repeater delays signals"
        assert result.url == "https://minecraft.fandom.com/wiki/Redstone%20Repeater"
        assert result.key_points == ()
        assert result.source_type is SourceType.MINECRAFT

    @patch.object(MinecraftWikiClient, "_make_request")
    async def test_search_params(self, mock_req, client):
        mock_req.return_value = {"query": {"search": []}}
        await client.search("creeper")
        assert mock_req.call_args.args[0] == "/api.php"
        assert mock_req.call_args.kwargs["params"]["srsearch"] == "creeper"

    @patch.object(MinecraftWikiClient, "_make_request")
    async def test_no_hits(self, mock_req, client):
        mock_req.return_value = {"query": {"search": []}}
        assert await client.search("pikachu") == []

    @patch.object(MinecraftWikiClient, "_make_request")
    async def test_markup_only_snippet(self, mock_req, client):
        mock_req.return_value = {"query": {"search": [{"title": "Stub", "snippet": "<span></span>"}]}}
        assert await client.search("stub") == []

    @patch.object(MinecraftWikiClient, "_make_request")
    async def test_returns_empty_on_none(self, mock_req, client):
        mock_req.return_value = None
        assert await client.search("creeper") == []

    @patch.object(MinecraftWikiClient, "_make_request")
    async def test_url_keeps_uri_component_safe_chars(self, mock_req, client):
        mock_req.return_value = {"query": {"search": [{"title": "Creeper (mob)", "snippet": "A hostile mob"}]}}

        results = await client.search("creeper")

        assert results[0].url == "https://minecraft.fandom.com/wiki/Creeper%20(mob)"
