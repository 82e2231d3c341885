"""Delete-marked orchestrator.

Moves every marked name of a kind into pending deletion, dispatches one
delete per name and redraws immediately so pending styling shows before
any delete resolves. A failed delete restores the mark; a successful one is
confirmed later, when a poll no longer reports the name.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from kubelens.constants.enums import ResourceKind
from kubelens.controllers.base import ClusterCommandExecutor
from kubelens.controllers.polling import NotifyCallback, RedrawCallback
from kubelens.exceptions import DeleteFailure
from kubelens.models.state.resource_state import ResourceState

logger = logging.getLogger(__name__)


class DeleteMarkedOrchestrator:
    """Dispatches deletes for marked resources and reconciles the outcome."""

    def __init__(
        self,
        state: ResourceState,
        executor: ClusterCommandExecutor,
        on_redraw: RedrawCallback,
        notify: NotifyCallback,
    ) -> None:
        self._state = state
        self._executor = executor
        self._on_redraw = on_redraw
        self._notify = notify

    def delete_marked(self, kind: ResourceKind) -> list[asyncio.Task[None]]:
        """Delete every marked resource of ``kind``.

        Must be called from the running event loop.

        Returns:
            One task per dispatched delete.
        """
        names = sorted(self._state.marked(kind))
        if not names:
            return []

        tasks = []
        for name in names:
            self._state.begin_delete(kind, name)
            tasks.append(
                asyncio.create_task(
                    self._delete(kind, name), name=f"delete-{kind.value}-{name}"
                )
            )
        logger.info("Deleting %d %s: %s", len(names), kind.value, ", ".join(names))
        self._on_redraw()
        return tasks

    def delete_all_marked(self, kinds: Iterable[ResourceKind]) -> list[asyncio.Task[None]]:
        """Run ``delete_marked`` for each kind that has marks."""
        tasks: list[asyncio.Task[None]] = []
        for kind in kinds:
            tasks.extend(self.delete_marked(kind))
        return tasks

    async def _delete(self, kind: ResourceKind, name: str) -> None:
        try:
            await self._executor.delete_resource(kind, name)
        except DeleteFailure as exc:
            self._state.delete_failed(kind, name)
            logger.warning("%s", exc)
            self._notify(str(exc), severity="error")
            self._on_redraw()
            return

        logger.info("Deleted %s %s", kind.singular, name)
        self._notify(f"Deleted {kind.singular} {name}", severity="information")


__all__ = ["DeleteMarkedOrchestrator"]
