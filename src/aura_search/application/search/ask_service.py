"""
AskService - One query in, one presentation-ready outcome out.

Outcomes:
- ANSWERED: summary + up to 3 source links
- INSUFFICIENT: every provider came back empty (expected, not an error)
- FAILED: the dispatch/merge pipeline itself raised
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aura_search.application.search.summary_builder import extract_links, summarize
from aura_search.domain.entities import AskOutcome, OutcomeStatus
from aura_search.shared.exceptions import InvalidQueryError

if TYPE_CHECKING:
    from aura_search.application.search.dispatcher import SourceDispatcher

logger = logging.getLogger(__name__)

INSUFFICIENT_MESSAGE = "Not enough information available to summarize this topic."
FAILURE_MESSAGE = "Failed to fetch data. Please try again."


class AskService:
    """Runs the dispatcher and summary builder for a single query."""

    def __init__(self, dispatcher: SourceDispatcher) -> None:
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> SourceDispatcher:
        return self._dispatcher

    async def ask(self, query: str) -> AskOutcome:
        """
        Answer one free-text query.

        Raises:
            InvalidQueryError: if the query is blank
        """
        if not query or not query.strip():
            raise InvalidQueryError(query)

        try:
            category_results = await self._dispatcher.dispatch_all(query)
            summary = summarize(category_results, query)
            links = extract_links(category_results) if summary else []
        except Exception as e:
            logger.exception(f"Query {query!r} failed: {e}")
            return AskOutcome(
                status=OutcomeStatus.FAILED,
                query=query,
                error=FAILURE_MESSAGE,
            )

        if summary is None:
            logger.info(f"Query {query!r}: no provider returned results")
            return AskOutcome(
                status=OutcomeStatus.INSUFFICIENT,
                query=query,
                error=INSUFFICIENT_MESSAGE,
            )

        return AskOutcome(
            status=OutcomeStatus.ANSWERED,
            query=query,
            summary=summary,
            links=tuple(links),
            categories=tuple(category_results),
        )
