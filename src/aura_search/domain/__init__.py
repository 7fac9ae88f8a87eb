"""
Domain Layer - Core Business Objects

Contains:
- entities: Normalized results, category sets, unified summary
"""

from .entities import (
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
