"""Constants module for kubelens.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar string constants
- timeouts.py: Timeout values
- limits.py: Validation limits
- defaults.py: Default values for settings
- ui.py: Attribute keys, layout widths and face styles
"""

from kubelens.constants.defaults import (
    OVERVIEW_KINDS_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    SHOW_COMPLETED_PODS_DEFAULT,
)
from kubelens.constants.enums import Face, FetchState, PodPhase, ResourceKind
from kubelens.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from kubelens.constants.values import APP_TITLE, FETCHING_TEXT, NONE_TEXT

__all__ = [
    "APP_TITLE",
    "CLUSTER_REQUEST_TIMEOUT",
    "FETCHING_TEXT",
    "KUBECTL_COMMAND_TIMEOUT",
    "NONE_TEXT",
    "OVERVIEW_KINDS_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "SHOW_COMPLETED_PODS_DEFAULT",
    "Face",
    "FetchState",
    "PodPhase",
    "ResourceKind",
]
