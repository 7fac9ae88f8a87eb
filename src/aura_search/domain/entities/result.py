"""
Normalized Result Model for Multi-Source Search

Every source adapter maps its provider-specific payload into NormalizedResult,
so the dispatcher and summary builder never look at raw provider JSON.

Architecture Decision:
    Plain frozen dataclasses, no pydantic. Every value here is scoped to one
    query and never mutated after construction.

Example:
    >>> result = NormalizedResult(
    ...     title="Pikachu",
    ...     summary="pikachu is a electric type Pokémon with 35 HP.",
    ...     url="https://www.pokemon.com/us/pokedex/pikachu",
    ...     source_type=SourceType.POKEMON,
    ... )
    >>> result.to_dict()["sourceType"]
    'pokemon'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class SourceType(Enum):
    """Tag identifying the provider a result came from."""
    WIKIPEDIA = "wikipedia"
    REDDIT = "reddit"
    POKEMON = "pokemon"
    MINECRAFT = "minecraft"
    GOOGLE = "google"
    YOUTUBE = "youtube"
    PROGRAMMING = "programming"
    TRANSLATION = "translation"


class OutcomeStatus(Enum):
    """How a query ended, as seen by the presentation layer."""
    ANSWERED = "answered"
    INSUFFICIENT = "insufficient"
    FAILED = "failed"


@dataclass(frozen=True)
class NormalizedResult:
    """
    One provider record in the common schema.

    ``url`` is the identity key used for link de-duplication.
    """
    title: str
    summary: str
    url: str
    source_type: SourceType
    key_points: tuple[str, ...] = ()
    thumbnail: str | None = None

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("NormalizedResult requires a title")
        if not self.summary:
            raise ValueError("NormalizedResult requires a summary")
        if not self.url:
            raise ValueError("NormalizedResult requires a url")
        # Accept any iterable of strings for key points
        object.__setattr__(self, "key_points", tuple(self.key_points))

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys; thumbnail omitted when absent."""
        data: dict[str, Any] = {
            "title": self.title,
            "summary": self.summary,
            "keyPoints": list(self.key_points),
            "url": self.url,
            "sourceType": self.source_type.value,
        }
        if self.thumbnail:
            data["thumbnail"] = self.thumbnail
        return data


@dataclass(frozen=True)
class CategoryResultSet:
    """One adapter's contribution for one query."""
    category: str
    results: tuple[NormalizedResult, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "results", tuple(self.results))

    @property
    def is_empty(self) -> bool:
        return not self.results

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category,
            "results": [r.to_dict() for r in self.results],
        }


@dataclass(frozen=True)
class UnifiedSummary:
    """Merged answer across every category of one query."""
    main_answer: str
    key_points: tuple[str, ...] = ()
    sources: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "mainAnswer": self.main_answer,
            "keyPoints": list(self.key_points),
            "sources": list(self.sources),
        }


@dataclass(frozen=True)
class SourceLink:
    title: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "url": self.url}


@dataclass(frozen=True)
class AskOutcome:
    """
    Result of one query as handed to the presentation layer.

    - ANSWERED: ``summary`` and ``links`` are populated
    - INSUFFICIENT: no provider had anything to say
    - FAILED: the pipeline itself broke; ``error`` holds the user message
    """
    status: OutcomeStatus
    query: str
    summary: UnifiedSummary | None = None
    links: tuple[SourceLink, ...] = ()
    categories: tuple[CategoryResultSet, ...] = ()
    error: str | None = None

    @property
    def answered(self) -> bool:
        return self.status is OutcomeStatus.ANSWERED

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "status": self.status.value,
            "query": self.query,
        }
        if self.summary is not None:
            data.update(self.summary.to_dict())
            data["sourceLinks"] = [link.to_dict() for link in self.links]
            data["categories"] = [c.to_dict() for c in self.categories]
        if self.error:
            data["error"] = self.error
        return data
