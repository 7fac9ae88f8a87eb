"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

import asyncio

import pytest

from aura_search.domain.entities import CategoryResultSet, NormalizedResult, SourceType

# ============================================================
# Result Fixtures
# ============================================================


def make_result(
    source_type: SourceType = SourceType.WIKIPEDIA,
    title: str = "Alan Turing",
    summary: str = "Alan Turing was an English mathematician and computer scientist.",
    url: str = "https://en.wikipedia.org/wiki/Alan_Turing",
    key_points: tuple[str, ...] = (),
    thumbnail: str | None = None,
) -> NormalizedResult:
    return NormalizedResult(
        title=title,
        summary=summary,
        url=url,
        source_type=source_type,
        key_points=key_points,
        thumbnail=thumbnail,
    )


@pytest.fixture
def wikipedia_result():
    return make_result(
        summary=(
            "Alan Mathison Turing was an English mathematician and computer scientist. "
            "He was highly influential in the development of theoretical computer science. "
            "Turing is widely considered to be the father of artificial intelligence."
        ),
    )


@pytest.fixture
def pokemon_result():
    return make_result(
        source_type=SourceType.POKEMON,
        title="Pikachu",
        summary="pikachu is a electric type Pokémon with 35 HP.",
        url="https://www.pokemon.com/us/pokedex/pikachu",
        key_points=("Type: electric", "Height: 0.4m", "Weight: 6kg", "Abilities: static, lightning-rod"),
    )


@pytest.fixture
def reddit_result():
    return make_result(
        source_type=SourceType.REDDIT,
        title="What is your favourite Pokémon?",
        summary="Discussion thread on Reddit",
        url="https://www.reddit.com/r/pokemon/comments/abc/",
        key_points=("120 upvotes", "45 comments", "r/pokemon"),
    )


@pytest.fixture
def category_results(wikipedia_result, pokemon_result, reddit_result):
    """Three non-empty categories in dispatcher order."""
    return [
        CategoryResultSet(category="Pokémon Database", results=(pokemon_result,)),
        CategoryResultSet(category="Reddit Discussions", results=(reddit_result,)),
        CategoryResultSet(category="Wikipedia Summary", results=(wikipedia_result,)),
    ]


# ============================================================
# Adapter Fixtures
# ============================================================


class FakeAdapter:
    """In-memory adapter with optional latency and failure injection."""

    def __init__(
        self,
        category: str,
        results: list[NormalizedResult] | None = None,
        source_type: SourceType = SourceType.WIKIPEDIA,
        delay: float = 0.0,
        error: Exception | None = None,
    ) -> None:
        self.category = category
        self.source_type = source_type
        self._results = list(results or [])
        self._delay = delay
        self._error = error
        self.queries: list[str] = []
        self.closed = False

    async def search(self, query: str) -> list[NormalizedResult]:
        self.queries.append(query)
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._error is not None:
            raise self._error
        return list(self._results)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_adapter_factory():
    return FakeAdapter
