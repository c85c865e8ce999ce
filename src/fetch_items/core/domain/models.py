"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta del JSON remoto sin acoplar el Core a librerías
  de I/O.
- `extra="ignore"` tolera campos nuevos del endpoint sin romper el decode.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Item(BaseModel):
    """Un elemento de la lista remota.

    `name` puede faltar, ser `null` o vacío; el pipeline decide qué se muestra.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        strict=True,
    )

    id: int = Field(
        ...,
        description="Identificador único del item.",
    )
    list_id: int = Field(
        ...,
        alias="listId",
        description="Lista a la que pertenece (clave de agrupación).",
    )
    name: str | None = Field(
        default=None,
        description="Nombre visible; ausente equivale a null.",
    )


GroupedItems = dict[int, list[Item]]
"""Items agrupados por `list_id`, claves en orden ascendente."""


class FetchStatus(str, Enum):
    """Estados posibles de una descarga."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class FetchState:
    """Estado observable por la vista.

    Solo `SUCCESS` lleva `groups` y solo `FAILURE` lleva `error_message`.
    """

    status: FetchStatus = FetchStatus.IDLE
    groups: GroupedItems = field(default_factory=dict)
    error_message: str | None = None

    @classmethod
    def idle(cls) -> "FetchState":
        return cls()

    @classmethod
    def loading(cls) -> "FetchState":
        return cls(status=FetchStatus.LOADING)

    @classmethod
    def success(cls, groups: GroupedItems) -> "FetchState":
        return cls(status=FetchStatus.SUCCESS, groups=groups)

    @classmethod
    def failure(cls, message: str) -> "FetchState":
        return cls(status=FetchStatus.FAILURE, error_message=message)

    @property
    def is_terminal(self) -> bool:
        return self.status in (FetchStatus.SUCCESS, FetchStatus.FAILURE)
