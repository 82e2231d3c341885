"""Application state models."""

from kubelens.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)
from kubelens.models.state.resource_state import ResourceState, StateSnapshot

__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSaveError",
    "ResourceState",
    "StateSnapshot",
]
