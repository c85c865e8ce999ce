"""Paleta de acentos por grupo.

Cada `list_id` recibe siempre el mismo color; con más de 4 listas los colores
se repiten en ciclo.
"""

from __future__ import annotations

from typing import NamedTuple


class Color(NamedTuple):
    """Color RGB de 8 bits por canal."""

    red: int
    green: int
    blue: int

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def rich_style(self, *, foreground: str = "black") -> str:
        """Estilo Rich con este color como fondo."""

        return f"{foreground} on {self.hex}"


PASTEL_PALETTE: tuple[Color, ...] = (
    Color(255, 209, 178),  # orange
    Color(255, 253, 208),  # cream
    Color(249, 213, 211),  # coral
    Color(253, 203, 186),  # peach
)


def color_for_list_id(list_id: int) -> Color:
    """Devuelve el acento del grupo.

    `%` de Python es no negativo con divisor positivo, así que ids negativos
    también caen dentro de la paleta (-1 -> último color).
    """

    return PASTEL_PALETTE[list_id % len(PASTEL_PALETTE)]
