"""Item processing pipeline.

Pure helpers that turn the raw decoded list into the grouped structure the
view renders. Nothing here performs I/O or touches state, so every function
can be exercised directly with literal lists.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from fetch_items.core.domain.models import GroupedItems, Item


def has_display_name(item: Item) -> bool:
    """True when `name` is present and not the empty string (no trimming)."""

    return item.name is not None and item.name != ""


def filter_named_items(items: Iterable[Item]) -> list[Item]:
    """Drop items whose name is null or empty."""

    return [item for item in items if has_display_name(item)]


def sort_items(items: Iterable[Item]) -> list[Item]:
    """Sort by `list_id`, then by `name` using plain code-point ordering.

    Callers must filter first: the key dereferences `name` unconditionally.
    """

    return sorted(items, key=lambda item: (item.list_id, item.name))


def group_by_list_id(items: Iterable[Item]) -> GroupedItems:
    """Partition items by `list_id`, keeping their relative order."""

    grouped: GroupedItems = {}
    for item in items:
        grouped.setdefault(item.list_id, []).append(item)
    return grouped


def process_items(items: Sequence[Item]) -> GroupedItems:
    """Filter, sort and group a raw item list.

    Total: empty or fully filtered input yields an empty mapping. Keys come
    out in ascending `list_id` order because grouping runs on sorted input.
    """

    return group_by_list_id(sort_items(filter_named_items(items)))
