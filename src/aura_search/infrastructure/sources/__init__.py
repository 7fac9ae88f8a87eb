"""
Knowledge Source Adapters

One adapter per external provider. Every adapter exposes ``category``,
``source_type``, ``async search(query) -> list[NormalizedResult]`` (never
raises) and ``async close()``.

Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │                    SourceDispatcher                      │
    │                (fixed registration order)                │
    └───────────────────────────┬─────────────────────────────┘
                                │
    ┌───────────────────────────▼─────────────────────────────┐
    │  Google │ PokéAPI │ Minecraft │ Reddit │ YouTube         │
    │  Programming (gated) │ Translation (gated) │ Wikipedia   │
    └─────────────────────────────────────────────────────────┘
"""

from __future__ import annotations

import logging
from typing import Any

from .base_client import BaseAPIClient, BaseSourceAdapter, SourceAdapter
from .google_search import GoogleSearchClient
from .minecraft_wiki import MinecraftWikiClient
from .placeholders import (
    KeywordGatedPlaceholder,
    ProgrammingDocsPlaceholder,
    TranslationPlaceholder,
)
from .pokeapi import PokeAPIClient
from .reddit import RedditClient
from .wikipedia import WikipediaClient
from .youtube import YouTubeClient

logger = logging.getLogger(__name__)


def default_adapters(
    google_api_key: str | None = None,
    google_cx: str | None = None,
    google_max_results: int = 10,
    youtube_api_key: str | None = None,
    timeout: float = 30.0,
    max_retries: int = 1,
    **client_kwargs: Any,
) -> list[SourceAdapter]:
    """
    Build the canonical adapter roster in display order.

    The order here is the category order of every query's output.
    """
    http_kwargs: dict[str, Any] = {"timeout": timeout, "max_retries": max_retries, **client_kwargs}

    google = GoogleSearchClient(
        api_key=google_api_key,
        cx=google_cx,
        max_results=google_max_results,
        **http_kwargs,
    )
    youtube = YouTubeClient(api_key=youtube_api_key, **http_kwargs)

    if not google.is_configured:
        logger.info("Google Custom Search disabled (set GOOGLE_API_KEY and GOOGLE_CX)")
    if not youtube.is_configured:
        logger.info("YouTube search disabled (set YOUTUBE_API_KEY)")

    return [
        google,
        PokeAPIClient(**http_kwargs),
        MinecraftWikiClient(**http_kwargs),
        RedditClient(**http_kwargs),
        youtube,
        ProgrammingDocsPlaceholder(),
        TranslationPlaceholder(),
        WikipediaClient(**http_kwargs),
    ]


__all__ = [
    "BaseAPIClient",
    "BaseSourceAdapter",
    "SourceAdapter",
    "GoogleSearchClient",
    "PokeAPIClient",
    "MinecraftWikiClient",
    "RedditClient",
    "YouTubeClient",
    "WikipediaClient",
    "KeywordGatedPlaceholder",
    "ProgrammingDocsPlaceholder",
    "TranslationPlaceholder",
    "default_adapters",
]
