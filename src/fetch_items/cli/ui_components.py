"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La vista solo consume `FetchState` y la paleta; no conoce HTTP.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fetch_items.core.domain.models import FetchState, FetchStatus, GroupedItems, Item
from fetch_items.core.domain.palette import color_for_list_id

HEADER_STYLE = "bold #333333"


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("Items", style="bold #333333")
    subtitle = Text("Agrupados por List ID", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="#f4ebd9", padding=(1, 4)))


def build_group_table(list_id: int, items: list[Item]) -> Table:
    """Una sección: cabecera `List ID n`, sub-cabecera Name/ID y filas tintadas."""

    style = color_for_list_id(list_id).rich_style()
    table = Table(
        title=Text(f"List ID {list_id}", style=HEADER_STYLE),
        title_justify="left",
        expand=True,
        row_styles=[style],
        header_style="bold",
    )
    table.add_column("Name", no_wrap=True)
    table.add_column("ID", justify="right")
    for item in items:
        table.add_row(Text(item.name if item.name is not None else "null"), str(item.id))
    return table


def build_groups_view(groups: GroupedItems) -> Group:
    """Todas las secciones en orden ascendente de `list_id`."""

    return Group(*(build_group_table(list_id, groups[list_id]) for list_id in sorted(groups)))


def render_state(console: Console, state: FetchState) -> None:
    """Listener de `ItemsViewModel`: pinta cada transición de estado."""

    if state.status is FetchStatus.LOADING:
        console.print("[dim]Loading items...[/dim]")
    elif state.status is FetchStatus.FAILURE:
        console.print(f"[red]{escape(state.error_message or '')}[/red]")
    elif state.status is FetchStatus.SUCCESS:
        if not state.groups:
            console.print("[yellow]No items to show.[/yellow]")
            return
        console.print(build_groups_view(state.groups))
