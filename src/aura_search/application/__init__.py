"""
Application Layer - Use Cases and Orchestration

Contains:
- search: Source dispatch, summary building, ask use case
"""

from .search import AskService, SourceDispatcher, extract_links, summarize

__all__ = [
    "AskService",
    "SourceDispatcher",
    "summarize",
    "extract_links",
]
