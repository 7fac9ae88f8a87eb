"""
Aura Search MCP Server

A standalone Model Context Protocol server that answers free-text questions
from several public knowledge sources at once.

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tools/: ask_anything tool and its output formatting
- container: DI container (dependency-injector) for adapter lifecycle
"""

from __future__ import annotations

import logging
import os
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any, cast

from mcp.server.fastmcp import FastMCP

from aura_search.container import (
    DEFAULT_GOOGLE_MAX_RESULTS,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ApplicationContainer,
)
from aura_search.shared.exceptions import ConfigurationError, ErrorContext

from .instructions import SERVER_INSTRUCTIONS
from .tools import register_all_tools

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from aura_search.application.search.ask_service import AskService
    from aura_search.application.search.dispatcher import SourceDispatcher

logger = logging.getLogger(__name__)

DEFAULT_SERVER_NAME = "aura-search"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# ── Module-level DI container ──────────────────────────────────────────────
_container: ApplicationContainer | None = None


def get_container() -> ApplicationContainer:
    """Get the application DI container.

    Raises:
        RuntimeError: If ``create_server()`` has not been called yet.
    """
    if _container is None:
        msg = "Container not initialized. Call create_server() first."
        raise RuntimeError(msg)
    return _container


def _make_lifespan(
    container: ApplicationContainer,
) -> Callable[[FastMCP[Any]], AbstractAsyncContextManager[ApplicationContainer]]:
    """Create a FastMCP lifespan handler bound to *container*."""

    @asynccontextmanager
    async def _lifespan(server: FastMCP[Any]) -> AsyncIterator[ApplicationContainer]:
        logger.info("Lifecycle: startup, source adapters ready")
        try:
            yield container
        finally:
            dispatcher = cast("SourceDispatcher", container.dispatcher())
            await dispatcher.aclose()
            logger.info("Lifecycle: shutdown, source adapters closed")

    return _lifespan


def create_server(
    google_api_key: str | None = None,
    google_cx: str | None = None,
    youtube_api_key: str | None = None,
    google_max_results: int = DEFAULT_GOOGLE_MAX_RESULTS,
    timeout: float = DEFAULT_TIMEOUT,
    max_retries: int = DEFAULT_MAX_RETRIES,
    name: str = DEFAULT_SERVER_NAME,
) -> FastMCP:
    """
    Create and configure the Aura Search MCP server.

    Args:
        google_api_key: Google Custom Search API key (Google source is off without it).
        google_cx: Google Custom Search engine id.
        youtube_api_key: YouTube Data API key (YouTube source is off without it).
        google_max_results: Cap on Google results per query.
        timeout: Per-request HTTP timeout in seconds.
        max_retries: 429 retries per request inside each adapter.
        name: Server name.

    Returns:
        Configured FastMCP server instance.
    """
    global _container
    logger.info("Initializing Aura Search MCP Server...")

    _container = ApplicationContainer()
    _container.config.from_dict(
        {
            "google_api_key": google_api_key,
            "google_cx": google_cx,
            "google_max_results": google_max_results,
            "youtube_api_key": youtube_api_key,
            "timeout": timeout,
            "max_retries": max_retries,
        }
    )

    ask_service = cast("AskService", _container.ask_service())
    logger.info(f"Sources enabled: {', '.join(ask_service.dispatcher.categories)}")

    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        lifespan=_make_lifespan(_container),
    )

    registered = register_all_tools(mcp, ask_service)
    logger.info(f"Tool registration complete: {registered}")

    return mcp


def _env(name: str) -> str | None:
    return os.environ.get(name, "").strip() or None


def _env_number[N: (int, float)](name: str, kind: type[N], default: N, minimum: N) -> N:
    """
    Read a numeric setting from the environment.

    Raises:
        ConfigurationError: if the value is not a number of ``kind`` or is below ``minimum``
    """
    raw = _env(name)
    if raw is None:
        return default

    try:
        value = kind(raw)
    except ValueError:
        value = None
    if value is None or value < minimum:
        raise ConfigurationError(
            f"{name} must be a {kind.__name__} >= {minimum}, got {raw!r}",
            context=ErrorContext(operation="main", input_value=raw, suggestion=f"Unset {name} to use {default}"),
        )
    return value


def main():
    """Run the MCP server over stdio."""
    level_name = (_env("AURA_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )

    server = create_server(
        google_api_key=_env("GOOGLE_API_KEY"),
        google_cx=_env("GOOGLE_CX"),
        youtube_api_key=_env("YOUTUBE_API_KEY"),
        google_max_results=_env_number("GOOGLE_MAX_RESULTS", int, DEFAULT_GOOGLE_MAX_RESULTS, 1),
        timeout=_env_number("AURA_HTTP_TIMEOUT", float, DEFAULT_TIMEOUT, 0.1),
        max_retries=_env_number("AURA_HTTP_MAX_RETRIES", int, DEFAULT_MAX_RETRIES, 0),
    )

    server.run()


if __name__ == "__main__":
    main()
