"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers de la única petición que hace la app.
- Facilita testeo: `transport=` acepta un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from fetch_items.core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que toda petición se comporte igual.
    - Permite inyectar un transporte falso en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


class HttpxTransport:
    """Implementación de `HttpTransport` sobre httpx.

    Un status no exitoso se trata como fallo de transporte
    (`httpx.HTTPStatusError`), igual que un error de conexión o timeout.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def send(self, url: str) -> bytes:
        async with build_async_client(self._settings, transport=self._transport) as client:
            resp = await client.get(url)
        resp.raise_for_status()
        return resp.content
