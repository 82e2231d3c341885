"""Exception hierarchy for kubelens.

Fetch and delete failures are recovered by the polling coordinator and the
delete orchestrator. ``UnknownResource`` is fatal only to the requested
operation. ``ContractViolation`` signals a renderer bug and aborts a redraw.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kubelens.constants.enums import ResourceKind


class KubelensError(Exception):
    """Base exception for kubelens errors."""


class FetchFailure(KubelensError):
    """Raised when listing resources of a kind fails."""

    def __init__(self, kind: ResourceKind, message: str) -> None:
        super().__init__(f"Failed to fetch {kind.value}: {message}")
        self.kind = kind
        self.message = message


class DeleteFailure(KubelensError):
    """Raised when deleting a single resource fails."""

    def __init__(self, kind: ResourceKind, name: str, message: str) -> None:
        super().__init__(f"Failed to delete {kind.singular} {name}: {message}")
        self.kind = kind
        self.name = name
        self.message = message


class UnknownResource(KubelensError):
    """Raised when a resource lookup by name finds nothing."""

    def __init__(self, kind: ResourceKind, name: str) -> None:
        super().__init__(f"Unknown {kind.singular}: {name}")
        self.kind = kind
        self.name = name


class ContractViolation(KubelensError):
    """Raised when a renderer emits a tree the evaluator cannot accept."""


__all__ = [
    "ContractViolation",
    "DeleteFailure",
    "FetchFailure",
    "KubelensError",
    "UnknownResource",
]
