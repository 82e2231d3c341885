"""Controllers module for kubelens.

This module provides the cluster command executor interface, its kubectl
implementation, and the coordinators that feed the resource state store.
"""

from __future__ import annotations

from kubelens.controllers.base import ClusterCommandExecutor
from kubelens.controllers.deletion import DeleteMarkedOrchestrator
from kubelens.controllers.kubectl import KubectlCommandError, KubectlExecutor
from kubelens.controllers.polling import PollingCoordinator

__all__ = [
    "ClusterCommandExecutor",
    "DeleteMarkedOrchestrator",
    "KubectlCommandError",
    "KubectlExecutor",
    "PollingCoordinator",
]
