"""Tests for BaseAPIClient HTTP behaviour and the adapter contract."""

from __future__ import annotations

import httpx
import pytest

from aura_search.domain.entities import NormalizedResult, SourceType
from aura_search.infrastructure.sources.base_client import (
    DEFAULT_USER_AGENT,
    BaseAPIClient,
    BaseSourceAdapter,
    SourceAdapter,
)
from aura_search.shared.async_utils import CircuitBreaker


def _client(handler, **kwargs) -> BaseAPIClient:
    kwargs.setdefault("min_interval", 0)
    return BaseAPIClient(
        base_url="https://api.test",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


# ============================================================
# _make_request
# ============================================================


class TestMakeRequest:
    async def test_success_json(self):
        seen: list[httpx.Request] = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        async with _client(handler) as client:
            result = await client._make_request("/search", params={"q": "mew & mewtwo"})

        assert result == {"ok": True}
        assert seen[0].url.host == "api.test"
        assert seen[0].url.path == "/search"
        assert seen[0].url.params["q"] == "mew & mewtwo"
        assert b"mew+%26+mewtwo" in seen[0].url.query or b"mew%20%26%20mewtwo" in seen[0].url.query
        assert seen[0].headers["User-Agent"] == DEFAULT_USER_AGENT

    async def test_full_url_bypasses_base(self):
        seen: list[httpx.Request] = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={})

        async with _client(handler) as client:
            await client._make_request("https://other.test/x")

        assert seen[0].url.host == "other.test"

    async def test_text_response(self):
        async with _client(lambda request: httpx.Response(200, text="plain")) as client:
            assert await client._make_request("/t", expect_json=False) == "plain"

    async def test_http_error_returns_none(self):
        async with _client(lambda request: httpx.Response(500)) as client:
            assert await client._make_request("/t") is None

    async def test_not_found_returns_none(self):
        async with _client(lambda request: httpx.Response(404)) as client:
            assert await client._make_request("/t") is None

    async def test_invalid_json_returns_none(self):
        async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
            assert await client._make_request("/t") is None

    async def test_network_error_returns_none(self):
        def handler(request):
            raise httpx.ConnectError("unreachable", request=request)

        async with _client(handler, max_retries=0) as client:
            assert await client._make_request("/t") is None

    async def test_429_retried_then_success(self):
        calls = {"n": 0}

        def handler(request):
            calls["n"] += 1
            if calls["n"] == 1:
                return httpx.Response(429, headers={"Retry-After": "0"})
            return httpx.Response(200, json={"ok": True})

        async with _client(handler, max_retries=1) as client:
            assert await client._make_request("/t") == {"ok": True}
        assert calls["n"] == 2

    async def test_429_exhausted_returns_none(self):
        calls = {"n": 0}

        def handler(request):
            calls["n"] += 1
            return httpx.Response(429, headers={"Retry-After": "0"})

        async with _client(handler, max_retries=1) as client:
            assert await client._make_request("/t") is None
        assert calls["n"] == 2

    async def test_open_circuit_skips_request(self):
        calls = {"n": 0}

        def handler(request):
            calls["n"] += 1
            return httpx.Response(200, json={})

        breaker = CircuitBreaker(failure_threshold=1, recovery_timeout=60.0)
        breaker._state = "open"
        breaker._last_failure_time = 10**12

        async with _client(handler, circuit_breaker=breaker) as client:
            assert await client._make_request("/t") is None
        assert calls["n"] == 0


class TestRetryAfter:
    def test_header_value(self):
        response = httpx.Response(429, headers={"Retry-After": "3"})
        assert BaseAPIClient._get_retry_after(response, 0) == 3.0

    def test_backoff_fallback(self):
        response = httpx.Response(429, headers={"Retry-After": "soon"})
        assert BaseAPIClient._get_retry_after(response, 1) == 4.0


# ============================================================
# Adapter contract
# ============================================================


class _BrokenAdapter(BaseSourceAdapter):
    _service_name = "Broken"
    category = "Broken"
    source_type = SourceType.GOOGLE

    async def _search(self, query: str) -> list[NormalizedResult]:
        payload: dict = {}
        return [payload["missing"]]


class TestBaseSourceAdapter:
    async def test_search_never_raises(self):
        async with _BrokenAdapter(min_interval=0) as adapter:
            assert await adapter.search("anything") == []

    def test_satisfies_protocol(self):
        assert isinstance(_BrokenAdapter(), SourceAdapter)
