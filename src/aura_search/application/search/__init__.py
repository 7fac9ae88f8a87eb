"""
Aggregation Pipeline

Key Components:
- SourceDispatcher: Concurrent fan-out to every knowledge source
- summarize / extract_links: Merge categories into one answer + links
- AskService: Query → AskOutcome for the presentation layer

Architecture:
    User Query
        │
        ▼
    ┌──────────────────┐
    │ SourceDispatcher │  ← All adapters in parallel, fixed category order
    └────────┬─────────┘
             │ list[CategoryResultSet] (empty categories dropped)
             ▼
    ┌──────────────────┐
    │  summarize()     │  ← Primary source, sentence merge, key points
    │  extract_links() │  ← Unique by URL, top 3
    └────────┬─────────┘
             ▼
        AskOutcome
"""

from .ask_service import FAILURE_MESSAGE, INSUFFICIENT_MESSAGE, AskService
from .dispatcher import SourceDispatcher
from .summary_builder import (
    combine_text,
    dedupe_key_points,
    extract_links,
    select_primary,
    split_sentences,
    summarize,
)

__all__ = [
    "AskService",
    "SourceDispatcher",
    "summarize",
    "extract_links",
    "combine_text",
    "dedupe_key_points",
    "select_primary",
    "split_sentences",
    "INSUFFICIENT_MESSAGE",
    "FAILURE_MESSAGE",
]
