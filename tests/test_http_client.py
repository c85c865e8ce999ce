"""Tests for the httpx transport, driven by httpx.MockTransport."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from fetch_items.adapters.fetch_client import FetchClient
from fetch_items.adapters.http_client import HttpxTransport, build_async_client
from fetch_items.core.domain.errors import NoDataError, TransportError

URL = "https://api.example.com/items.json"


def _transport(handler) -> HttpxTransport:
    return HttpxTransport(transport=httpx.MockTransport(handler))


def test_send_returns_body_and_sets_headers(settings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b'[{"id": 1, "listId": 1, "name": "a"}]')

    transport = HttpxTransport(settings, transport=httpx.MockTransport(handler))
    body = asyncio.run(transport.send(URL))
    assert body.startswith(b"[")
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert seen[0].headers["User-Agent"] == settings.user_agent
    assert seen[0].url.query == b""


def test_http_error_status_is_transport_error(settings) -> None:
    transport = _transport(lambda request: httpx.Response(404, content=b"missing"))
    with pytest.raises(TransportError) as info:
        asyncio.run(FetchClient(transport).fetch_items(URL))
    assert isinstance(info.value.cause, httpx.HTTPStatusError)


def test_connection_error_is_transport_error(settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportError) as info:
        asyncio.run(FetchClient(_transport(handler)).fetch_items(URL))
    assert isinstance(info.value.cause, httpx.ConnectError)


def test_empty_success_body_is_no_data(settings) -> None:
    transport = _transport(lambda request: httpx.Response(200, content=b""))
    with pytest.raises(NoDataError):
        asyncio.run(FetchClient(transport).fetch_items(URL))


def test_build_async_client_uses_settings(settings) -> None:
    client = build_async_client(settings, extra_headers={"X-Test": "1"})
    try:
        assert client.timeout.read == settings.http_timeout_seconds
        assert client.headers["X-Test"] == "1"
        assert client.follow_redirects is True
    finally:
        asyncio.run(client.aclose())
