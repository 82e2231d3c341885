"""Base cluster command executor for kubelens.

The rendering core never knows how resources are fetched or deleted; it only
talks to this interface. Implementations raise ``FetchFailure`` and
``DeleteFailure`` and handle their own timeouts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from kubelens.constants.enums import ResourceKind


class ClusterCommandExecutor(ABC):
    """Issues list and delete operations against a cluster."""

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the cluster is reachable.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def list_resources(self, kind: ResourceKind) -> list[dict[str, Any]]:
        """List resources of a kind.

        Returns:
            Raw Kubernetes objects in cluster order

        Raises:
            FetchFailure: If the list operation fails.
        """
        ...

    @abstractmethod
    async def delete_resource(self, kind: ResourceKind, name: str) -> None:
        """Delete a single resource.

        Raises:
            DeleteFailure: If the delete operation fails.
        """
        ...
