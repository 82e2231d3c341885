"""Tests for formatting helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from kubelens.utils.formatting import (
    ELLIPSIS,
    ellipsize,
    format_utc_timestamp,
    parse_utc_timestamp,
    time_diff_string,
)

START = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestEllipsize:
    """Tests for ellipsize()."""

    def test_short_text_unchanged(self) -> None:
        assert ellipsize("svc-a", 30) == "svc-a"

    def test_exact_width_unchanged(self) -> None:
        assert ellipsize("abcde", 5) == "abcde"

    def test_long_text_truncated_to_width(self) -> None:
        result = ellipsize("abcdefghij", 5)
        assert result == "abcd" + ELLIPSIS
        assert len(result) == 5

    def test_non_positive_width_returns_empty(self) -> None:
        assert ellipsize("abc", 0) == ""
        assert ellipsize("abc", -3) == ""


class TestTimeDiffString:
    """Tests for time_diff_string()."""

    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(days=36, hours=7), "36d"),
            (timedelta(hours=5, minutes=59), "5h"),
            (timedelta(minutes=12, seconds=30), "12m"),
            (timedelta(seconds=42), "42s"),
            (timedelta(0), "0s"),
        ],
    )
    def test_largest_unit_wins(self, delta: timedelta, expected: str) -> None:
        assert time_diff_string(START, START + delta) == expected

    def test_future_start_clamps_to_zero(self) -> None:
        assert time_diff_string(START + timedelta(minutes=5), START) == "0s"


class TestParseUtcTimestamp:
    """Tests for parse_utc_timestamp()."""

    def test_parses_zulu_timestamp(self) -> None:
        parsed = parse_utc_timestamp("2017-04-03T16:33:54Z")
        assert parsed == datetime(2017, 4, 3, 16, 33, 54, tzinfo=timezone.utc)
        assert parsed.tzinfo is not None

    def test_converts_offsets_to_utc(self) -> None:
        parsed = parse_utc_timestamp("2017-04-03T18:33:54+02:00")
        assert parsed == datetime(2017, 4, 3, 16, 33, 54, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        ("value", "microsecond"),
        [
            ("2017-04-03T16:33:54.5Z", 500000),
            ("2017-04-03T16:33:54.123Z", 123000),
            ("2017-04-03T16:33:54.123456789Z", 123456),
        ],
    )
    def test_fractional_seconds_of_any_precision(self, value: str, microsecond: int) -> None:
        parsed = parse_utc_timestamp(value)
        assert parsed == datetime(2017, 4, 3, 16, 33, 54, microsecond, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["", "not-a-date", None])
    def test_invalid_values_raise(self, value: object) -> None:
        with pytest.raises(ValueError):
            parse_utc_timestamp(value)  # type: ignore[arg-type]

    def test_format_matches_kubernetes_style(self) -> None:
        assert format_utc_timestamp(parse_utc_timestamp("2017-04-03T16:33:54Z")) == (
            "2017-04-03T16:33:54Z"
        )
