"""Contratos de transporte y decodificación.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el cliente HTTP real y los fakes de test sean intercambiables
  sin acoplar el Core a implementaciones concretas.
"""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class HttpTransport(Protocol):
    """Contrato mínimo para ejecutar un GET.

    Reglas de diseño:
    - `send` es asíncrono porque hace I/O.
    - Devuelve el cuerpo crudo; cualquier fallo de red se propaga como excepción.
    """

    async def send(self, url: str) -> bytes:
        """Ejecuta un único GET sobre `url` y devuelve el cuerpo de la respuesta."""

        ...


Decoder = Callable[[bytes], T]
"""Convierte un cuerpo no vacío en `T`; lanza excepción si no puede."""
