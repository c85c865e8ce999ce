"""Taxonomía de errores de descarga.

Por qué excepciones propias:
- La vista solo necesita un mensaje legible; el log necesita la causa original.
- Cada fallo es terminal para ese intento: no hay reintentos.
"""

from __future__ import annotations


class FetchError(Exception):
    """Base de todos los fallos de una descarga."""

    default_message = "Fetch failed"

    def __init__(self, message: str | None = None, *, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class InvalidURLError(FetchError):
    """La URL no es válida; no se llegó a hacer ninguna petición."""

    default_message = "Invalid URL"

    def __init__(self, url: str, *, cause: BaseException | None = None) -> None:
        self.url = url
        super().__init__(f"Invalid URL: {url!r}", cause=cause)


class TransportError(FetchError):
    """Fallo de red (conexión, timeout, TLS, status HTTP no exitoso)."""

    default_message = "Transport error"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause) or type(cause).__name__, cause=cause)


class NoDataError(FetchError):
    """El servidor respondió sin cuerpo."""

    default_message = "No data received"


class DecodingError(FetchError):
    """El cuerpo no es JSON válido o no tiene la forma esperada."""

    default_message = "The data couldn't be read because it isn't in the correct format."

    def __init__(self, cause: BaseException) -> None:
        super().__init__(self.default_message, cause=cause)
