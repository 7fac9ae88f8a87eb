"""
SourceDispatcher - Concurrent fan-out to every registered adapter.

Architecture Decision:
    Adapters promise never to raise (an empty list is their failure value),
    so the dispatcher runs them in one fail-fast TaskGroup with no
    per-adapter fault aggregation. Anything that does escape an adapter is
    a broken contract and fails the whole query as a PipelineError.

    Category order in the output is the registration order, independent of
    which provider answers first.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from aura_search.domain.entities import CategoryResultSet
from aura_search.infrastructure.sources.base_client import SourceAdapter
from aura_search.shared.async_utils import gather_with_errors
from aura_search.shared.exceptions import ErrorContext, PipelineError

logger = logging.getLogger(__name__)


class SourceDispatcher:
    """
    Runs all adapters for one query.

    Example:
        dispatcher = SourceDispatcher(default_adapters())
        categories = await dispatcher.dispatch_all("pikachu")
    """

    def __init__(self, adapters: Sequence[SourceAdapter]) -> None:
        self._adapters = list(adapters)

    @property
    def adapters(self) -> list[SourceAdapter]:
        return list(self._adapters)

    @property
    def categories(self) -> list[str]:
        return [adapter.category for adapter in self._adapters]

    async def dispatch_all(self, query: str) -> list[CategoryResultSet]:
        """
        Query every adapter concurrently and keep the non-empty categories.

        Raises:
            PipelineError: if an adapter broke its never-raise contract
        """
        start_time = time.perf_counter()

        try:
            outputs = await gather_with_errors(*(adapter.search(query) for adapter in self._adapters))
        except Exception as e:
            logger.exception(f"Dispatch failed for {query!r}: {e!r}")
            raise PipelineError(
                "Source dispatch failed",
                context=ErrorContext(operation="dispatch_all", input_value=query),
            ) from e

        category_sets = [
            CategoryResultSet(category=adapter.category, results=tuple(results))
            for adapter, results in zip(self._adapters, outputs, strict=True)
        ]
        non_empty = [category_set for category_set in category_sets if not category_set.is_empty]

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Dispatch {query!r}: {len(non_empty)}/{len(category_sets)} categories with results "
            f"({sum(len(c.results) for c in non_empty)} results, {elapsed_ms:.0f} ms)"
        )
        return non_empty

    async def aclose(self) -> None:
        """Close every adapter's HTTP client."""
        for adapter in self._adapters:
            try:
                await adapter.close()
            except Exception as e:
                logger.warning(f"Failed to close {adapter.category}: {e}")
