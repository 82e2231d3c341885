"""Resource state store.

Holds, per resource kind, the last fetched collection together with the
user's delete marks. Results from the polling coordinator and intents from
the user are merged here into one snapshot the renderers can read.

All mutations run inside a single call on the event loop thread, so a name
moves between the ``marked`` and ``pending_deletion`` sets without any
intermediate state being observable.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

from kubelens.constants.enums import ResourceKind
from kubelens.exceptions import UnknownResource

logger = logging.getLogger(__name__)

ResourceItem = Mapping[str, Any]
Collection = tuple[ResourceItem, ...]


def resource_name(item: ResourceItem) -> str:
    """Name of a raw Kubernetes object."""
    return str(item.get("metadata", {}).get("name", ""))


@dataclass
class _KindState:
    collection: Collection | None = None
    marked: set[str] = field(default_factory=set)
    pending_deletion: set[str] = field(default_factory=set)


@dataclass(frozen=True)
class StateSnapshot:
    """Immutable view of the store for a single redraw.

    ``now`` is the reference clock shared by every age column of the redraw.
    """

    now: datetime
    collections: Mapping[ResourceKind, Collection | None]
    marked: Mapping[ResourceKind, frozenset[str]]
    pending_deletion: Mapping[ResourceKind, frozenset[str]]
    context: str | None = None
    namespace: str | None = None
    cluster: str | None = None
    target_resolved: bool = False
    show_completed_pods: bool = False

    def collection(self, kind: ResourceKind) -> Collection | None:
        """Collection for a kind, or None when never fetched."""
        return self.collections.get(kind)

    def is_marked(self, kind: ResourceKind, name: str) -> bool:
        return name in self.marked.get(kind, frozenset())

    def is_pending_deletion(self, kind: ResourceKind, name: str) -> bool:
        return name in self.pending_deletion.get(kind, frozenset())


class ResourceState:
    """Process-wide resource state, passed explicitly to its users.

    Constructed once by the app, ``reset()`` when the cluster context
    changes, and discarded at exit.
    """

    def __init__(self, context: str | None = None, namespace: str | None = None) -> None:
        self.context = context
        self.namespace = namespace
        self.cluster: str | None = None
        # False until the context and cluster lookup has finished.
        self.target_resolved = False
        self._kinds: dict[ResourceKind, _KindState] = {}

    def _kind(self, kind: ResourceKind) -> _KindState:
        state = self._kinds.get(kind)
        if state is None:
            state = self._kinds[kind] = _KindState()
        return state

    # =========================================================================
    # Collections
    # =========================================================================

    def get_collection(self, kind: ResourceKind) -> Collection | None:
        """Current snapshot for ``kind``; None means not fetched yet."""
        return self._kind(kind).collection

    def update_collection(self, kind: ResourceKind, items: Iterable[ResourceItem]) -> None:
        """Replace the snapshot and drop marks for names that disappeared.

        A pending deletion whose name is gone is thereby confirmed.
        """
        state = self._kind(kind)
        collection: Collection = tuple(items)
        state.collection = collection

        present = {resource_name(item) for item in collection}
        confirmed = state.pending_deletion - present
        stale = state.marked - present
        if confirmed:
            logger.debug("Deletion confirmed for %s: %s", kind.value, sorted(confirmed))
        if stale:
            logger.debug("Dropping stale marks for %s: %s", kind.value, sorted(stale))
        state.pending_deletion -= confirmed
        state.marked -= stale

    def lookup(self, kind: ResourceKind, name: str) -> ResourceItem:
        """Find an item by name.

        Raises:
            UnknownResource: If the kind was never fetched or has no such item.
        """
        for item in self._kind(kind).collection or ():
            if resource_name(item) == name:
                return item
        raise UnknownResource(kind, name)

    def names(self, kind: ResourceKind) -> list[str]:
        """Names in the current snapshot, in cluster order."""
        return [resource_name(item) for item in self._kind(kind).collection or ()]

    # =========================================================================
    # Marks
    # =========================================================================

    def marked(self, kind: ResourceKind) -> frozenset[str]:
        return frozenset(self._kind(kind).marked)

    def pending_deletion(self, kind: ResourceKind) -> frozenset[str]:
        return frozenset(self._kind(kind).pending_deletion)

    def mark(self, kind: ResourceKind, name: str) -> None:
        """Flag a name for deletion; ignored while its deletion is pending."""
        state = self._kind(kind)
        if name in state.pending_deletion:
            return
        state.marked.add(name)

    def unmark(self, kind: ResourceKind, name: str) -> None:
        self._kind(kind).marked.discard(name)

    def unmark_all(self, kind: ResourceKind) -> None:
        self._kind(kind).marked.clear()

    def begin_delete(self, kind: ResourceKind, name: str) -> None:
        """Move a name from ``marked`` to ``pending_deletion``."""
        state = self._kind(kind)
        if name in state.pending_deletion:
            return
        state.marked.discard(name)
        state.pending_deletion.add(name)

    def delete_failed(self, kind: ResourceKind, name: str) -> None:
        """Return a name from ``pending_deletion`` to ``marked``."""
        state = self._kind(kind)
        if name not in state.pending_deletion:
            return
        state.pending_deletion.discard(name)
        state.marked.add(name)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def reset(self, context: str | None = None, namespace: str | None = None) -> None:
        """Forget every collection and mark, e.g. after switching context."""
        self.context = context
        self.namespace = namespace
        self.cluster = None
        self.target_resolved = False
        self._kinds.clear()

    def set_target(self, context: str | None, cluster: str | None) -> None:
        """Record the outcome of the context lookup; None means unknown."""
        self.context = context
        self.cluster = cluster
        self.target_resolved = True

    def snapshot(self, now: datetime, *, show_completed_pods: bool = False) -> StateSnapshot:
        """Capture an immutable snapshot for one redraw."""
        return StateSnapshot(
            now=now,
            collections=MappingProxyType(
                {kind: state.collection for kind, state in self._kinds.items()}
            ),
            marked=MappingProxyType(
                {kind: frozenset(state.marked) for kind, state in self._kinds.items()}
            ),
            pending_deletion=MappingProxyType(
                {kind: frozenset(state.pending_deletion) for kind, state in self._kinds.items()}
            ),
            context=self.context,
            namespace=self.namespace,
            cluster=self.cluster,
            target_resolved=self.target_resolved,
            show_completed_pods=show_completed_pods,
        )


__all__ = [
    "Collection",
    "ResourceItem",
    "ResourceState",
    "StateSnapshot",
    "resource_name",
]
