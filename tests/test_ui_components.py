"""Rendering tests for the Rich view."""

from __future__ import annotations

from rich.console import Console

from fetch_items.cli.ui_components import build_group_table, render_state
from fetch_items.core.domain.models import FetchState
from fetch_items.core.domain.palette import color_for_list_id

from conftest import item


def _console() -> Console:
    return Console(record=True, width=80, color_system=None)


def test_group_table_uses_group_color() -> None:
    table = build_group_table(3, [item(1, 3, "Item 1")])
    assert table.row_styles == [color_for_list_id(3).rich_style()]
    assert [c.header for c in table.columns] == ["Name", "ID"]


def test_render_success() -> None:
    console = _console()
    render_state(console, FetchState.success({1: [item(7, 1, "[bold]x")]}))
    text = console.export_text()
    assert "List ID 1" in text
    assert "[bold]x" in text
    assert "7" in text


def test_render_failure_escapes_markup() -> None:
    console = _console()
    render_state(console, FetchState.failure("Error fetching data: [Errno 111] refused"))
    assert "[Errno 111]" in console.export_text()


def test_render_empty_success() -> None:
    console = _console()
    render_state(console, FetchState.success({}))
    assert "No items to show." in console.export_text()


def test_idle_renders_nothing() -> None:
    console = _console()
    render_state(console, FetchState.idle())
    assert console.export_text() == ""
