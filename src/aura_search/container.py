"""
Application DI Container (dependency-injector).

Centralizes adapter, dispatcher and service creation.

Usage::

    from aura_search.container import ApplicationContainer

    container = ApplicationContainer()
    container.config.from_dict({
        "google_api_key": None,
        "google_cx": None,
        "youtube_api_key": None,
        "timeout": 30.0,
    })

    ask_service = container.ask_service()

    # In tests, override any provider:
    container.adapters.override(providers.Object([fake_adapter]))
"""

from __future__ import annotations

import logging

from dependency_injector import containers, providers

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 1
DEFAULT_GOOGLE_MAX_RESULTS = 10


def _create_adapters(
    google_api_key: str | None,
    google_cx: str | None,
    google_max_results: int | None,
    youtube_api_key: str | None,
    timeout: float | None,
    max_retries: int | None,
) -> list[object]:
    """Lazy factory for the canonical adapter roster (avoids top-level import)."""
    from aura_search.infrastructure.sources import default_adapters

    return default_adapters(
        google_api_key=google_api_key or None,
        google_cx=google_cx or None,
        google_max_results=int(google_max_results or DEFAULT_GOOGLE_MAX_RESULTS),
        youtube_api_key=youtube_api_key or None,
        timeout=float(timeout or DEFAULT_TIMEOUT),
        max_retries=int(max_retries if max_retries is not None else DEFAULT_MAX_RETRIES),
    )


def _create_dispatcher(adapters: list[object]) -> object:
    from aura_search.application.search.dispatcher import SourceDispatcher

    return SourceDispatcher(adapters)  # type: ignore[arg-type]


def _create_ask_service(dispatcher: object) -> object:
    from aura_search.application.search.ask_service import AskService

    return AskService(dispatcher)  # type: ignore[arg-type]


class ApplicationContainer(containers.DeclarativeContainer):
    """Central DI container for Aura Search.

    Manages creation and lifecycle of all core services:
    - ``adapters``: knowledge source adapters in display order
    - ``dispatcher``: concurrent fan-out over ``adapters``
    - ``ask_service``: query → outcome use case
    """

    config = providers.Configuration()

    adapters = providers.Singleton(
        _create_adapters,
        google_api_key=config.google_api_key,
        google_cx=config.google_cx,
        google_max_results=config.google_max_results,
        youtube_api_key=config.youtube_api_key,
        timeout=config.timeout,
        max_retries=config.max_retries,
    )

    dispatcher = providers.Singleton(
        _create_dispatcher,
        adapters=adapters,
    )

    ask_service = providers.Singleton(
        _create_ask_service,
        dispatcher=dispatcher,
    )


__all__ = ["ApplicationContainer"]
