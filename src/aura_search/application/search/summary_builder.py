"""
Summary Builder - Merge per-category results into one answer.

Pure functions, no I/O:
1. Flatten categories (dispatcher order, then within-category order)
2. De-duplicate key points by case-insensitive substring containment
3. Pick a primary result by provider priority
4. Seed the answer with the primary summary, borrow sentences from others
5. De-duplicate source links by URL

Architecture Decision:
    Key-point de-duplication is plain substring containment, first seen wins.
    A short point contained in a longer one (or the reverse) is dropped even
    when the two are unrelated. No similarity metric is applied.

Example:
    >>> summary = summarize(categories, "pikachu")
    >>> summary.main_answer
    'pikachu is a electric type Pokémon with 35 HP.'
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from aura_search.domain.entities import (
    CategoryResultSet,
    NormalizedResult,
    SourceLink,
    SourceType,
    UnifiedSummary,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

MAX_KEY_POINTS = 5
MAX_SENTENCES = 4
MAX_SOURCE_LINKS = 3

# Seed sentences below this count trigger borrowing from other sources
MIN_SEED_SENTENCES = 3
# Fragments must be longer than this (after trimming) to count as sentences
MIN_SENTENCE_LENGTH = 10
# Leading characters compared when checking a borrowed sentence for overlap
OVERLAP_PREFIX_LENGTH = 20

# Most authoritative first; anything else falls back to flattened order
PRIMARY_SOURCE_PRIORITY: tuple[SourceType, ...] = (
    SourceType.WIKIPEDIA,
    SourceType.POKEMON,
    SourceType.MINECRAFT,
)

_SENTENCE_SPLIT_RE = re.compile(r"\.\s+")


# =============================================================================
# Sentence Handling
# =============================================================================


def split_sentences(text: str) -> list[str]:
    """
    Split on ". " and keep fragments longer than 10 characters.

    Each kept fragment is trimmed and gets a period re-appended. The text's
    own closing period stands in for the delimiter the split consumed, so it
    is dropped first. Ellipses survive intact.
    """
    fragments = _SENTENCE_SPLIT_RE.split(text)
    sentences = []
    for i, fragment in enumerate(fragments):
        fragment = fragment.strip()
        if len(fragment) <= MIN_SENTENCE_LENGTH:
            continue
        if i == len(fragments) - 1:
            fragment = fragment.removesuffix(".")
        sentences.append(f"{fragment}.")
    return sentences


def _sentence_count(text: str) -> int:
    return len(_SENTENCE_SPLIT_RE.split(text))


def combine_text(primary_text: str, all_texts: Sequence[str], max_sentences: int = MAX_SENTENCES) -> str:
    """
    Build the answer paragraph.

    Takes up to ``max_sentences`` sentences from ``primary_text``. When it
    yields fewer than 3, each other text (compared by value, not identity)
    may contribute its first sentence whose leading 20 characters do not
    already occur in the answer, while the sentence budget allows.

    Args:
        primary_text: Seed text from the primary result
        all_texts: Every result summary; may include the seed itself
        max_sentences: Sentence budget

    Returns:
        Sentences joined with ". " and ending with ".", or "" if none
    """
    sentences = split_sentences(primary_text)
    combined = " ".join(sentences[:max_sentences])

    if len(sentences) < MIN_SEED_SENTENCES and len(all_texts) > 1:
        for text in (t for t in all_texts if t != primary_text):
            unique_sentence = next(
                (
                    s
                    for s in split_sentences(text)
                    if s.lower()[:OVERLAP_PREFIX_LENGTH] not in combined.lower()
                ),
                None,
            )
            if unique_sentence and _sentence_count(combined) < max_sentences:
                combined = f"{combined} {unique_sentence}" if combined else unique_sentence

    # Trailing space lets the split consume the last re-appended period too
    final_sentences = [fragment.strip() for fragment in _SENTENCE_SPLIT_RE.split(f"{combined} ")]
    final_sentences = [s for s in final_sentences if s][:max_sentences]

    if not final_sentences:
        return ""
    return ". ".join(final_sentences) + "."


# =============================================================================
# Key Points
# =============================================================================


def dedupe_key_points(points: Iterable[str], limit: int = MAX_KEY_POINTS) -> list[str]:
    """
    Keep points that are not a case-insensitive substring of (or superstring
    of) an already accepted point, in first-seen order, then truncate.
    """
    accepted: list[str] = []
    for point in points:
        lowered = point.lower()
        if not any(
            lowered in existing.lower() or existing.lower() in lowered
            for existing in accepted
        ):
            accepted.append(point)
    return accepted[:limit]


# =============================================================================
# Primary Selection
# =============================================================================


def flatten_results(category_results: Sequence[CategoryResultSet]) -> list[NormalizedResult]:
    return [result for category_set in category_results for result in category_set.results]


def select_primary(results: Sequence[NormalizedResult]) -> NormalizedResult | None:
    """Highest-priority provider wins; otherwise the first result."""
    for source_type in PRIMARY_SOURCE_PRIORITY:
        for result in results:
            if result.source_type is source_type:
                return result
    return results[0] if results else None


# =============================================================================
# Public API
# =============================================================================


def summarize(category_results: Sequence[CategoryResultSet], query: str) -> UnifiedSummary | None:
    """
    Merge every category of one query into a UnifiedSummary.

    Returns:
        None when there is nothing to summarize (no categories, or no results)
    """
    if not category_results:
        return None

    all_results: list[NormalizedResult] = []
    source_names: list[str] = []
    for category_set in category_results:
        for result in category_set.results:
            all_results.append(result)
            if category_set.category not in source_names:
                source_names.append(category_set.category)

    if not all_results:
        return None

    key_points = dedupe_key_points(point for result in all_results for point in result.key_points)

    primary = select_primary(all_results)
    summaries = [result.summary for result in all_results if result.summary]
    main_answer = combine_text(primary.summary, summaries, MAX_SENTENCES) if primary else ""

    logger.debug(
        f"Summary for {query!r}: primary={primary.source_type.value if primary else None}, "
        f"{len(key_points)} key points, {len(source_names)} sources"
    )

    return UnifiedSummary(
        main_answer=main_answer,
        key_points=tuple(key_points),
        sources=tuple(source_names),
    )


def extract_links(
    category_results: Sequence[CategoryResultSet],
    limit: int = MAX_SOURCE_LINKS,
) -> list[SourceLink]:
    """First ``limit`` links in dispatcher order, unique by exact URL."""
    links: list[SourceLink] = []
    seen_urls: set[str] = set()
    for result in flatten_results(category_results):
        if result.url in seen_urls:
            continue
        seen_urls.add(result.url)
        links.append(SourceLink(title=result.title, url=result.url))
    return links[:limit]
