"""Utility helpers for kubelens."""

from kubelens.utils.formatting import (
    ellipsize,
    format_utc_timestamp,
    parse_utc_timestamp,
    time_diff_string,
)

__all__ = [
    "ellipsize",
    "format_utc_timestamp",
    "parse_utc_timestamp",
    "time_diff_string",
]
