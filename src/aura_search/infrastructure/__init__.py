"""
Infrastructure Layer - External Systems Integration

Contains:
- sources: Knowledge provider adapters (Wikipedia, Reddit, PokéAPI, ...)
"""

from .sources import SourceAdapter, default_adapters

__all__ = [
    "SourceAdapter",
    "default_adapters",
]
