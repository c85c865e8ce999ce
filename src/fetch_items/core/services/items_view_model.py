"""Items view model.

Owns the single observable `FetchState` the view reads. The view triggers
`fetch_items()` on first display; the fetch completion is the only writer and
the registered listener is the only reader.

Completion runs on the event loop that awaited `fetch_items()`, so the state
transitions and listener calls happen on the same thread as the view.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from fetch_items.adapters.fetch_client import FetchClient
from fetch_items.core.config import AppSettings
from fetch_items.core.domain.errors import FetchError
from fetch_items.core.domain.models import FetchState, GroupedItems, Item
from fetch_items.core.domain.palette import Color, color_for_list_id
from fetch_items.core.services.item_pipeline import process_items

_logger = logging.getLogger(__name__)

StateListener = Callable[[FetchState], None]

ERROR_PREFIX = "Error fetching data"


class ItemsViewModel:
    """Fetches the item list and exposes the grouped result."""

    def __init__(
        self,
        client: FetchClient | None = None,
        *,
        settings: AppSettings | None = None,
        endpoint_url: str | None = None,
    ) -> None:
        settings = settings or AppSettings()
        self._client = client if client is not None else FetchClient(settings=settings)
        self._endpoint_url = endpoint_url if endpoint_url is not None else settings.endpoint_url
        self._state = FetchState.idle()
        self._listener: StateListener | None = None

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def grouped_items(self) -> GroupedItems:
        return self._state.groups

    @property
    def error_message(self) -> str | None:
        return self._state.error_message

    def subscribe(self, listener: StateListener) -> None:
        """Register the view. Only one listener is supported."""

        if self._listener is not None and self._listener is not listener:
            raise RuntimeError("ItemsViewModel already has a listener")
        self._listener = listener
        listener(self._state)

    def unsubscribe(self) -> None:
        self._listener = None

    def _set_state(self, state: FetchState) -> None:
        """Store `state` and notify the listener.

        A failing listener is logged and does not stop the fetch: the state is
        always updated, so the view can re-read it later.
        """

        self._state = state
        if self._listener is None:
            return
        try:
            self._listener(state)
        except Exception:
            _logger.exception("state listener failed on %s", state.status.value)

    async def fetch_items(self) -> FetchState:
        """Run one fetch and publish its outcome.

        Never raises `FetchError`: failures end up in `FetchState.error_message`.
        """

        self._set_state(FetchState.loading())
        try:
            items = await self._client.fetch_items(self._endpoint_url)
        except FetchError as exc:
            _logger.warning(
                "fetch of %s failed: %s (cause: %r)",
                self._endpoint_url,
                exc.message,
                exc.cause,
            )
            self._set_state(FetchState.failure(f"{ERROR_PREFIX}: {exc.message}"))
            return self._state

        _logger.info("fetched %d items from %s", len(items), self._endpoint_url)
        self.process_items(items)
        return self._state

    def process_items(self, items: Sequence[Item]) -> GroupedItems:
        """Run the pipeline on `items` and publish the result."""

        groups = process_items(items)
        self._set_state(FetchState.success(groups))
        return groups

    @staticmethod
    def color_for_list_id(list_id: int) -> Color:
        return color_for_list_id(list_id)
