"""Settings persistence backed by a YAML file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from kubelens.constants.values import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from kubelens.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigLoadError,
    ConfigSaveError,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves ``AppSettings`` as YAML."""

    @staticmethod
    def default_path() -> Path:
        """Settings file location, honouring ``XDG_CONFIG_HOME``."""
        base = os.environ.get("XDG_CONFIG_HOME")
        config_home = Path(base) if base else Path.home() / ".config"
        return config_home / CONFIG_DIR_NAME / CONFIG_FILE_NAME

    @classmethod
    def load(cls, path: Path | None = None) -> AppSettings:
        """Load settings; a missing file yields defaults.

        Raises:
            ConfigLoadError: If the file cannot be read or fails validation.
        """
        settings_path = path or cls.default_path()
        if not settings_path.exists():
            logger.debug("No settings file at %s, using defaults", settings_path)
            return AppSettings()
        try:
            with settings_path.open(encoding="utf-8") as handle:
                raw = yaml.safe_load(handle) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(f"Cannot read {settings_path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigLoadError(f"{settings_path} must contain a mapping")
        try:
            return AppSettings.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid settings in {settings_path}: {exc}") from exc

    @classmethod
    def save(cls, settings: AppSettings, path: Path | None = None) -> Path:
        """Write settings to disk.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        settings_path = path or cls.default_path()
        try:
            settings_path.parent.mkdir(parents=True, exist_ok=True)
            with settings_path.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(
                    settings.model_dump(exclude_none=True),
                    handle,
                    default_flow_style=False,
                    sort_keys=False,
                )
        except OSError as exc:
            raise ConfigSaveError(f"Cannot write {settings_path}: {exc}") from exc
        return settings_path


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "ConfigSaveError",
]
