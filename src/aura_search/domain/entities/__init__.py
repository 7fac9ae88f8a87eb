"""
Domain Entities

Query-scoped value objects shared by adapters, dispatcher and summary builder.
"""

from __future__ import annotations

from .result import (
    AskOutcome,
    CategoryResultSet,
    NormalizedResult,
    OutcomeStatus,
    SourceLink,
    SourceType,
    UnifiedSummary,
)

__all__ = [
    "NormalizedResult",
    "CategoryResultSet",
    "UnifiedSummary",
    "SourceLink",
    "SourceType",
    "AskOutcome",
    "OutcomeStatus",
]
