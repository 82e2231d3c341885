"""Limit constants for kubelens.

All validation ranges for settings.
"""

from typing import Final

# ============================================================================
# Validation limits
# ============================================================================

REFRESH_INTERVAL_MIN: Final = 2
COMMAND_TIMEOUT_MIN: Final = 5

__all__ = [
    "COMMAND_TIMEOUT_MIN",
    "REFRESH_INTERVAL_MIN",
]
