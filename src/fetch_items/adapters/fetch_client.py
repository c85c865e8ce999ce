"""Cliente genérico de descarga JSON.

Responsabilidad:
- Validar la URL antes de tocar la red.
- Ejecutar un único GET a través del transporte inyectado.
- Decodificar el cuerpo con el decoder inyectado y clasificar cualquier fallo
  en la taxonomía de `core.domain.errors`.

Sin reintentos ni caché: cada llamada produce exactamente un resultado o una
excepción `FetchError`.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

import httpx
from pydantic import TypeAdapter

from fetch_items.adapters.http_client import HttpxTransport
from fetch_items.core.config import AppSettings
from fetch_items.core.domain.errors import (
    DecodingError,
    InvalidURLError,
    NoDataError,
    TransportError,
)
from fetch_items.core.domain.models import Item
from fetch_items.core.interfaces.transport import Decoder, HttpTransport

T = TypeVar("T")

_logger = logging.getLogger(__name__)

_ALLOWED_SCHEMES = ("http", "https")
_HOST_PUNCTUATION = frozenset("-.:")


class PydanticDecoder(Generic[T]):
    """Decoder basado en `TypeAdapter.validate_json`.

    JSON malformado y forma incorrecta producen `pydantic.ValidationError`.
    """

    def __init__(self, shape: Any) -> None:
        self._adapter: TypeAdapter[T] = TypeAdapter(shape)

    def __call__(self, body: bytes) -> T:
        return self._adapter.validate_json(body)


ITEMS_DECODER: PydanticDecoder[list[Item]] = PydanticDecoder(list[Item])


def validate_url(url: str) -> httpx.URL:
    """Parsea `url` y exige esquema http(s) y host."""

    if not isinstance(url, str) or not url:
        raise InvalidURLError(str(url))
    try:
        parsed = httpx.URL(url)
        port = parsed.port
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise InvalidURLError(url, cause=exc) from exc
    if parsed.scheme not in _ALLOWED_SCHEMES or not parsed.host:
        raise InvalidURLError(url)
    # httpx codifica con % los espacios del host en vez de fallar.
    if not all(ch.isalnum() or ch in _HOST_PUNCTUATION for ch in parsed.host):
        raise InvalidURLError(url)
    if port is not None and not 0 <= port <= 65535:
        raise InvalidURLError(url)
    return parsed


class FetchClient:
    """Descarga y decodifica un recurso JSON."""

    def __init__(
        self,
        transport: HttpTransport | None = None,
        *,
        settings: AppSettings | None = None,
    ) -> None:
        self._transport = transport if transport is not None else HttpxTransport(settings)

    async def fetch(self, url: str, decoder: Decoder[T]) -> T:
        validate_url(url)

        _logger.debug("GET %s", url)
        try:
            body = await self._transport.send(url)
        except Exception as exc:
            raise TransportError(exc) from exc

        if not body:
            raise NoDataError()

        try:
            return decoder(body)
        except Exception as exc:
            raise DecodingError(exc) from exc

    async def fetch_items(self, url: str) -> list[Item]:
        """Atajo para el endpoint de items."""

        return await self.fetch(url, ITEMS_DECODER)
