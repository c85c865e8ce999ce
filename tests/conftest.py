"""Shared fakes for the fetch-items test-suite."""

from __future__ import annotations

import pytest

from fetch_items.core.config import AppSettings
from fetch_items.core.domain.models import Item


class FakeTransport:
    """Deterministic `HttpTransport`: returns `body` or raises `error`."""

    def __init__(self, body: bytes = b"", error: BaseException | None = None) -> None:
        self.body = body
        self.error = error
        self.calls: list[str] = []

    async def send(self, url: str) -> bytes:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.body


def item(id: int, list_id: int, name: str | None) -> Item:
    return Item(id=id, listId=list_id, name=name)


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> AppSettings:
    monkeypatch.chdir(tmp_path)
    for key in ("ENDPOINT_URL", "HTTP_TIMEOUT_SECONDS", "USER_AGENT", "LOG_LEVEL"):
        monkeypatch.delenv(f"FETCH_ITEMS_{key}", raising=False)
    return AppSettings()
