"""
Placeholder Sources

Integrations that are not wired to a live backend yet. Each one activates
only when the query contains one of its topic keywords (case-insensitive
substring match) and then returns a single canned record pointing at the
provider's own search page. Returning that record is a normal outcome.
"""

from __future__ import annotations

import logging
import urllib.parse
from typing import ClassVar

from aura_search.domain.entities import NormalizedResult, SourceType

logger = logging.getLogger(__name__)


class KeywordGatedPlaceholder:
    """Base for canned, keyword-gated sources. No network I/O."""

    category: ClassVar[str] = ""
    source_type: ClassVar[SourceType]
    keywords: ClassVar[tuple[str, ...]] = ()
    title_template: ClassVar[str] = ""
    summary: ClassVar[str] = ""
    key_points: ClassVar[tuple[str, ...]] = ()
    search_url_template: ClassVar[str] = ""

    def matches(self, query: str) -> bool:
        lowered = query.lower()
        return any(keyword in lowered for keyword in self.keywords)

    async def search(self, query: str) -> list[NormalizedResult]:
        if not self.matches(query):
            return []

        logger.debug(f"{type(self).__name__}: keyword gate matched {query!r}")
        encoded = urllib.parse.quote(query, safe="")
        return [
            NormalizedResult(
                title=self.title_template.format(query=query),
                summary=self.summary,
                key_points=self.key_points,
                url=self.search_url_template.format(query=encoded),
                source_type=self.source_type,
            )
        ]

    async def close(self) -> None:
        return None


class ProgrammingDocsPlaceholder(KeywordGatedPlaceholder):
    category = "Programming Language Wikis"
    source_type = SourceType.PROGRAMMING
    keywords = (
        "javascript",
        "python",
        "java",
        "react",
        "node",
        "typescript",
        "css",
        "html",
        "sql",
        "api",
        "function",
        "class",
        "variable",
    )
    title_template = 'Programming documentation: "{query}"'
    summary = (
        "To enable programming wiki integration, implement MDN Web Docs API, DevDocs, "
        "or language-specific documentation APIs. This will provide code examples and API references."
    )
    key_points = (
        "Code examples and syntax",
        "API documentation",
        "Best practices and guides",
    )
    search_url_template = "https://developer.mozilla.org/en-US/search?q={query}"


class TranslationPlaceholder(KeywordGatedPlaceholder):
    category = "Translations"
    source_type = SourceType.TRANSLATION
    keywords = (
        "translate",
        "translation",
        "how do you say",
        "what is",
        "in spanish",
        "in french",
        "in hindi",
        "in chinese",
    )
    title_template = "Translation service"
    summary = (
        "To enable translation, integrate Google Translate API or LibreTranslate. "
        "This will provide translations across 100+ languages."
    )
    key_points = (
        "Multi-language support",
        "Text and phrase translation",
        "Pronunciation guides",
    )
    search_url_template = "https://translate.google.com/?text={query}"
