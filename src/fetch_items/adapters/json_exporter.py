"""Exportación JSON de los grupos.

Por qué JSON:
- Permite encadenar la salida con otras herramientas (`jq`, scripts).
- Usa los alias del wire (`listId`) para que la salida se parezca a la entrada.
"""

from __future__ import annotations

import json

from fetch_items.core.domain.models import GroupedItems


def dump_groups_json(groups: GroupedItems) -> str:
    """Serializa `GroupedItems` a JSON UTF-8 con formato estable."""

    payload = {
        str(list_id): [item.model_dump(mode="json", by_alias=True) for item in items]
        for list_id, items in groups.items()
    }
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
