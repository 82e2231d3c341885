"""Scalar string constants for kubelens."""

from typing import Final

APP_TITLE: Final = "kubelens"

FETCHING_TEXT: Final = "Fetching..."
NONE_TEXT: Final = "None."
UNKNOWN_TEXT: Final = "(unknown)"

CONFIG_DIR_NAME: Final = "kubelens"
CONFIG_FILE_NAME: Final = "settings.yaml"

__all__ = [
    "APP_TITLE",
    "CONFIG_DIR_NAME",
    "CONFIG_FILE_NAME",
    "FETCHING_TEXT",
    "NONE_TEXT",
    "UNKNOWN_TEXT",
]
