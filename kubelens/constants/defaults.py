"""Default values for settings.

All default values used in the AppSettings model.
"""

from typing import Final

# ============================================================================
# kubectl defaults
# ============================================================================

KUBECTL_PATH_DEFAULT: Final = "kubectl"

# ============================================================================
# UI defaults
# ============================================================================

REFRESH_INTERVAL_DEFAULT: Final = 10
AUTO_REFRESH_DEFAULT: Final = True
SHOW_COMPLETED_PODS_DEFAULT: Final = False
OVERVIEW_KINDS_DEFAULT: Final = (
    "services",
    "deployments",
    "pods",
    "configmaps",
    "secrets",
)

__all__ = [
    "AUTO_REFRESH_DEFAULT",
    "KUBECTL_PATH_DEFAULT",
    "OVERVIEW_KINDS_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "SHOW_COMPLETED_PODS_DEFAULT",
]
