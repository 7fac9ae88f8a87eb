"""Tests for normalized result entities."""

from __future__ import annotations

import dataclasses

import pytest

from aura_search.domain.entities import (
    AskOutcome,
    CategoryResultSet,
    NormalizedResult,
    OutcomeStatus,
    SourceLink,
    SourceType,
    UnifiedSummary,
)


class TestNormalizedResult:
    def test_required_fields(self):
        result = NormalizedResult(
            title="Pikachu",
            summary="pikachu is a electric type Pokémon with 35 HP.",
            url="https://www.pokemon.com/us/pokedex/pikachu",
            source_type=SourceType.POKEMON,
        )
        assert result.key_points == ()
        assert result.thumbnail is None

    @pytest.mark.parametrize("field_name", ["title", "summary", "url"])
    def test_empty_required_field_rejected(self, field_name):
        values = {"title": "t", "summary": "s", "url": "https://x.test", "source_type": SourceType.GOOGLE}
        values[field_name] = ""
        with pytest.raises(ValueError, match=field_name):
            NormalizedResult(**values)

    def test_key_points_coerced_to_tuple(self):
        result = NormalizedResult(
            title="t", summary="s", url="https://x.test", source_type=SourceType.REDDIT, key_points=["a", "b"]
        )
        assert result.key_points == ("a", "b")

    def test_frozen(self):
        result = NormalizedResult(title="t", summary="s", url="https://x.test", source_type=SourceType.REDDIT)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.title = "other"  # type: ignore[misc]

    def test_to_dict_camel_case(self):
        result = NormalizedResult(
            title="Pikachu",
            summary="s",
            url="https://x.test",
            source_type=SourceType.POKEMON,
            key_points=("Type: electric",),
            thumbnail="https://img.test/p.png",
        )
        assert result.to_dict() == {
            "title": "Pikachu",
            "summary": "s",
            "keyPoints": ["Type: electric"],
            "url": "https://x.test",
            "sourceType": "pokemon",
            "thumbnail": "https://img.test/p.png",
        }

    def test_to_dict_omits_missing_thumbnail(self):
        result = NormalizedResult(title="t", summary="s", url="https://x.test", source_type=SourceType.GOOGLE)
        assert "thumbnail" not in result.to_dict()


class TestCategoryResultSet:
    def test_is_empty(self):
        assert CategoryResultSet(category="Reddit Discussions").is_empty

    def test_results_coerced_to_tuple(self):
        result = NormalizedResult(title="t", summary="s", url="https://x.test", source_type=SourceType.GOOGLE)
        category_set = CategoryResultSet(category="Google Results", results=[result])
        assert category_set.results == (result,)
        assert not category_set.is_empty
        assert category_set.to_dict()["category"] == "Google Results"


class TestAskOutcome:
    def test_answered_to_dict(self):
        outcome = AskOutcome(
            status=OutcomeStatus.ANSWERED,
            query="pikachu",
            summary=UnifiedSummary(main_answer="Answer.", key_points=("a",), sources=("Pokémon Database",)),
            links=(SourceLink(title="Pikachu", url="https://x.test"),),
        )
        data = outcome.to_dict()
        assert outcome.answered
        assert data["status"] == "answered"
        assert data["mainAnswer"] == "Answer."
        assert data["keyPoints"] == ["a"]
        assert data["sources"] == ["Pokémon Database"]
        assert data["sourceLinks"] == [{"title": "Pikachu", "url": "https://x.test"}]
        assert "error" not in data

    def test_insufficient_to_dict(self):
        outcome = AskOutcome(status=OutcomeStatus.INSUFFICIENT, query="zzz", error="Not enough information.")
        data = outcome.to_dict()
        assert not outcome.answered
        assert data == {"status": "insufficient", "query": "zzz", "error": "Not enough information."}
