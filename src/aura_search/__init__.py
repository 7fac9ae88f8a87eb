"""
Aura Search - Ask-anything search aggregator

Sends one free-text query to several public knowledge sources in parallel
and merges their answers into a single short summary.

Usage:
    from aura_search import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict({"google_api_key": None, "google_cx": None})
    outcome = await container.ask_service().ask("pikachu")

    if outcome.answered:
        print(outcome.summary.main_answer)

Sources:
    - Wikipedia, Reddit, PokéAPI, Minecraft Wiki
    - Google Custom Search, YouTube (API keys required)
    - Programming docs / translation pointers (keyword-gated)
"""

from .application import AskService, SourceDispatcher, extract_links, summarize
from .container import ApplicationContainer
from .domain import (
    AskOutcome,
    CategoryResultSet,
    NormalizedResult,
    OutcomeStatus,
    SourceLink,
    SourceType,
    UnifiedSummary,
)

__version__ = "0.1.0"

__all__ = [
    # Use cases
    "AskService",
    "SourceDispatcher",
    "summarize",
    "extract_links",
    "ApplicationContainer",
    # Entities
    "AskOutcome",
    "CategoryResultSet",
    "NormalizedResult",
    "OutcomeStatus",
    "SourceLink",
    "SourceType",
    "UnifiedSummary",
]
