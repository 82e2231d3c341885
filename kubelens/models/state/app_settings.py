"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kubelens.constants.defaults import (
    AUTO_REFRESH_DEFAULT,
    KUBECTL_PATH_DEFAULT,
    OVERVIEW_KINDS_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    SHOW_COMPLETED_PODS_DEFAULT,
)
from kubelens.constants.enums import ResourceKind
from kubelens.constants.limits import COMMAND_TIMEOUT_MIN, REFRESH_INTERVAL_MIN
from kubelens.constants.timeouts import CLUSTER_REQUEST_TIMEOUT, KUBECTL_COMMAND_TIMEOUT


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # kubectl
    kubectl_path: str = KUBECTL_PATH_DEFAULT
    context: str | None = None
    namespace: str | None = None
    request_timeout: str = CLUSTER_REQUEST_TIMEOUT
    command_timeout: int = Field(default=KUBECTL_COMMAND_TIMEOUT, ge=COMMAND_TIMEOUT_MIN)

    # Refresh
    refresh_interval: int = Field(default=REFRESH_INTERVAL_DEFAULT, ge=REFRESH_INTERVAL_MIN)
    auto_refresh: bool = AUTO_REFRESH_DEFAULT

    # Overview
    show_completed_pods: bool = SHOW_COMPLETED_PODS_DEFAULT
    overview_kinds: list[str] = list(OVERVIEW_KINDS_DEFAULT)

    @field_validator("overview_kinds")
    @classmethod
    def _validate_kinds(cls, value: list[str]) -> list[str]:
        known = {kind.value for kind in ResourceKind}
        unknown = [item for item in value if item not in known]
        if unknown:
            raise ValueError(f"Unknown resource kinds: {', '.join(unknown)}")
        # Keep first occurrence order, drop duplicates.
        return list(dict.fromkeys(value))

    @property
    def kinds(self) -> list[ResourceKind]:
        """Configured overview kinds as enum members."""
        return [ResourceKind(item) for item in self.overview_kinds]


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
