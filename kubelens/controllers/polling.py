"""Polling coordinator - single-flight resource fetches per kind.

At most one list operation per resource kind is outstanding at any time. A
``refresh`` while one is in flight is dropped; the outstanding fetch still
completes and updates the state store. Failures leave the state untouched,
are reported once, and are never retried automatically.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Iterable

from kubelens.constants.enums import FetchState, ResourceKind
from kubelens.controllers.base import ClusterCommandExecutor
from kubelens.exceptions import FetchFailure
from kubelens.models.state.resource_state import ResourceState

logger = logging.getLogger(__name__)

RedrawCallback = Callable[[], None]
NotifyCallback = Callable[..., None]


class PollingCoordinator:
    """Guards list operations so each kind has at most one fetch in flight."""

    def __init__(
        self,
        state: ResourceState,
        executor: ClusterCommandExecutor,
        on_redraw: RedrawCallback,
        notify: NotifyCallback,
    ) -> None:
        """Initialize the coordinator.

        Args:
            state: Store receiving fetched collections.
            executor: Cluster command executor issuing list operations.
            on_redraw: Called after a successful fetch updated the store.
            notify: Called as ``notify(message, severity=...)`` on failures.
        """
        self._state = state
        self._executor = executor
        self._on_redraw = on_redraw
        self._notify = notify
        self._in_flight: dict[ResourceKind, asyncio.Task[None]] = {}
        self._fetch_states: dict[ResourceKind, FetchState] = {}

    def is_polling(self, kind: ResourceKind) -> bool:
        """Return True when a fetch for ``kind`` is outstanding."""
        return kind in self._in_flight

    def fetch_state(self, kind: ResourceKind) -> FetchState:
        """Outcome of the most recent fetch for ``kind``."""
        if self.is_polling(kind):
            return FetchState.LOADING
        return self._fetch_states.get(kind, FetchState.IDLE)

    def refresh(self, kind: ResourceKind) -> asyncio.Task[None] | None:
        """Start a fetch for ``kind`` unless one is already outstanding.

        Must be called from the running event loop.

        Returns:
            The new fetch task, or None when the call was dropped.
        """
        if kind in self._in_flight:
            logger.debug("Fetch for %s already in flight, dropping refresh", kind.value)
            return None
        task = asyncio.create_task(self._poll(kind), name=f"poll-{kind.value}")
        self._in_flight[kind] = task
        return task

    def refresh_all(self, kinds: Iterable[ResourceKind]) -> list[asyncio.Task[None]]:
        """Refresh several kinds; returns only the tasks actually started."""
        tasks = []
        for kind in kinds:
            task = self.refresh(kind)
            if task is not None:
                tasks.append(task)
        return tasks

    async def _poll(self, kind: ResourceKind) -> None:
        started = time.monotonic()
        try:
            items = await self._executor.list_resources(kind)
        except FetchFailure as exc:
            self._fetch_states[kind] = FetchState.ERROR
            logger.warning("%s", exc)
            self._notify(str(exc), severity="error")
            return
        finally:
            self._in_flight.pop(kind, None)

        self._state.update_collection(kind, items)
        self._fetch_states[kind] = FetchState.SUCCESS
        logger.debug(
            "Fetched %d %s in %.0fms",
            len(items),
            kind.value,
            (time.monotonic() - started) * 1000,
        )
        self._on_redraw()

    async def wait_idle(self) -> None:
        """Wait until every outstanding fetch has finished."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight.values()), return_exceptions=True)


__all__ = ["NotifyCallback", "PollingCoordinator", "RedrawCallback"]
