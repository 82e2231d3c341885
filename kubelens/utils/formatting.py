"""Formatting helpers for rendered resource columns.

Provides pure functions used by the resource renderers:
- Fixed-width truncation with an ellipsis
- Compact elapsed-time strings ("36d", "5h", "12m", "40s")
- Kubernetes UTC timestamp parsing and formatting
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

ELLIPSIS = "…"

# Seconds with a fraction of any precision; fromisoformat before 3.11 only
# takes 3 or 6 digits.
_FRACTIONAL_SECONDS = re.compile(r"(\d{2}:\d{2}:\d{2})\.(\d+)")

# Ordered largest first; the first unit with a non-zero count wins.
_TIME_UNITS: tuple[tuple[str, int], ...] = (
    ("d", 86400),
    ("h", 3600),
    ("m", 60),
)


def ellipsize(text: str, width: int) -> str:
    """Truncate text to at most ``width`` characters.

    Args:
        text: Text to truncate.
        width: Maximum display width.

    Returns:
        The text unchanged when it fits, otherwise the first ``width - 1``
        characters followed by an ellipsis.
    """
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    return text[: width - 1] + ELLIPSIS


def time_diff_string(start: datetime, now: datetime) -> str:
    """Format the time elapsed between ``start`` and ``now`` compactly.

    Examples:
        >>> from datetime import timedelta
        >>> t = datetime(2024, 1, 1, tzinfo=timezone.utc)
        >>> time_diff_string(t, t + timedelta(days=36, hours=3))
        '36d'
        >>> time_diff_string(t, t + timedelta(seconds=42))
        '42s'
    """
    seconds = int((now - start).total_seconds())
    if seconds < 0:
        seconds = 0
    for suffix, unit in _TIME_UNITS:
        if seconds >= unit:
            return f"{seconds // unit}{suffix}"
    return f"{seconds}s"


def parse_utc_timestamp(value: str) -> datetime:
    """Parse a Kubernetes timestamp string into an aware UTC datetime.

    Accepts ``2017-04-03T16:33:54Z`` as well as fractional seconds and
    explicit offsets.

    Raises:
        ValueError: If the value is not a valid timestamp.
    """
    if not isinstance(value, str) or not value:
        raise ValueError(f"Invalid timestamp: {value!r}")
    normalized = _FRACTIONAL_SECONDS.sub(
        lambda match: f"{match.group(1)}.{match.group(2)[:6].ljust(6, '0')}",
        value.strip().replace("Z", "+00:00"),
    )
    parsed = datetime.fromisoformat(normalized)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_utc_timestamp(value: datetime) -> str:
    """Render a datetime the way Kubernetes prints creation timestamps."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


__all__ = [
    "ELLIPSIS",
    "ellipsize",
    "format_utc_timestamp",
    "parse_utc_timestamp",
    "time_diff_string",
]
