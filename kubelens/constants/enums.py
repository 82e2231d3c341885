"""All enum definitions for kubelens.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Resource Enums
# =============================================================================


class ResourceKind(Enum):
    """Kubernetes resource kinds shown in the overview.

    The value is the plural name kubectl accepts on the command line.
    """

    SERVICES = "services"
    PODS = "pods"
    CONFIGMAPS = "configmaps"
    SECRETS = "secrets"
    DEPLOYMENTS = "deployments"

    @property
    def singular(self) -> str:
        """Singular noun used in user-facing messages."""
        return _SINGULAR_NAMES[self]


_SINGULAR_NAMES = {
    ResourceKind.SERVICES: "service",
    ResourceKind.PODS: "pod",
    ResourceKind.CONFIGMAPS: "configmap",
    ResourceKind.SECRETS: "secret",
    ResourceKind.DEPLOYMENTS: "deployment",
}


class PodPhase(Enum):
    """Pod status.phase values from Kubernetes API."""

    PENDING = "Pending"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


# =============================================================================
# Rendering Enums
# =============================================================================


class Face(Enum):
    """Abstract visual styles attached to rendered text.

    The terminal surface maps each face to a concrete rich style.
    """

    HEADING = "heading"
    SECTION_HEADING = "section-heading"
    HEADER = "header"
    DIMMED = "dimmed"
    PROGRESS = "progress"
    PENDING_DELETION = "pending-deletion"
    DELETE_MARK = "delete-mark"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


# =============================================================================
# Fetch State Enums
# =============================================================================


class FetchState(Enum):
    """Data fetch state values."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"
