"""Unit tests for the datetime attempt chain."""

from __future__ import annotations

from datetime import datetime

import pytest

from email_event.normalizer import (
    HardDefault,
    ManualFallback,
    Parsed,
    normalize_datetime,
    to_24_hour,
)


class TestParsed:
    """Inputs the generic parser understands."""

    @pytest.mark.parametrize(
        ("date", "time", "expected"),
        [
            ("March 15th, 2025", "2:00 PM", datetime(2025, 3, 15, 14, 0)),
            ("March 18th, 2025", "10:30 AM", datetime(2025, 3, 18, 10, 30)),
            ("2025-04-02", "14:45", datetime(2025, 4, 2, 14, 45)),
            ("December 1st 2024", "at 9am", datetime(2024, 12, 1, 9, 0)),
        ],
    )
    def test_full_date_and_time(self, now: datetime, date: str, time: str, expected: datetime) -> None:
        """Explicit dates and times are taken as written."""
        result = normalize_datetime(date, time, now)

        assert isinstance(result, Parsed)
        assert result.value == expected

    def test_missing_year_uses_current_year(self, now: datetime) -> None:
        """"Tuesday, March 15th" lands in the clock's year."""
        result = normalize_datetime("Tuesday, March 15th", "2:00 PM", now)

        assert isinstance(result, Parsed)
        assert result.value == datetime(now.year, 3, 15, 14, 0)

    def test_empty_inputs_default_to_today_2pm(self, now: datetime) -> None:
        """No date and no time -> today at 2:00 PM."""
        result = normalize_datetime("", "", now)

        assert isinstance(result, Parsed)
        assert result.value == datetime(2025, 3, 10, 14, 0)

    def test_at_3pm_today(self, now: datetime) -> None:
        """"at 3pm" with no date is 15:00 today."""
        result = normalize_datetime("", "at 3pm", now)

        assert result.value == datetime(2025, 3, 10, 15, 0)

    def test_custom_default_time(self, now: datetime) -> None:
        """``default_time`` replaces 2:00 PM when no time was found."""
        result = normalize_datetime("2025-04-02", "", now, default_time="9:15 AM")

        assert result.value == datetime(2025, 4, 2, 9, 15)

    def test_result_is_naive_with_zero_seconds(self, now: datetime) -> None:
        """Seconds, microseconds and tzinfo from the clock never leak in."""
        result = normalize_datetime("", "", now)

        assert result.value.tzinfo is None
        assert result.value.second == 0
        assert result.value.microsecond == 0


class TestManualFallback:
    """Unparseable dates fall back to the time string on today's date."""

    @pytest.mark.parametrize(
        ("time", "hour", "minute"),
        [
            ("at 3pm", 15, 0),
            ("3:45 PM", 15, 45),
            ("12:15 AM", 0, 15),
            ("12:30 pm", 12, 30),
            ("9:05", 9, 5),
            ("17:20", 17, 20),
        ],
    )
    def test_hour_and_minute(self, now: datetime, time: str, hour: int, minute: int) -> None:
        """Digits and am/pm are read straight from the time string."""
        result = normalize_datetime("sometime soon", time, now)

        assert isinstance(result, ManualFallback)
        assert result.value == datetime(2025, 3, 10, hour, minute)

    def test_no_digits_means_14(self, now: datetime) -> None:
        """A time without digits yields 14:00."""
        result = normalize_datetime("sometime soon", "teatime pm", now)

        assert isinstance(result, ManualFallback)
        assert result.value == datetime(2025, 3, 10, 14, 0)

    def test_start_with_no_room_to_end(self, now: datetime) -> None:
        """A parsed start in the last hour of year 9999 is rejected."""
        result = normalize_datetime("9999-12-31", "11:30 PM", now)

        assert isinstance(result, ManualFallback)
        assert result.value == datetime(2025, 3, 10, 23, 30)


class TestCalendarLimit:
    """Starts near ``datetime.max``."""

    def test_last_full_hour_is_parsed(self, now: datetime) -> None:
        """An event ending exactly at 23:59 on 9999-12-31 is still fine."""
        result = normalize_datetime("9999-12-31", "10:59 PM", now)

        assert isinstance(result, Parsed)
        assert result.value == datetime(9999, 12, 31, 22, 59)

    def test_clock_at_calendar_end(self) -> None:
        """With the clock on 9999-12-31 a late time drops to the 14:00 default."""
        result = normalize_datetime("9999-12-31", "11:30 PM", datetime(9999, 12, 31, 8, 0))

        assert isinstance(result, HardDefault)
        assert result.value == datetime(9999, 12, 31, 14, 0)


class TestHardDefault:
    """Out-of-range readings end at today 14:00."""

    @pytest.mark.parametrize("time", ["25:00", "10:75 AM"])
    def test_out_of_range(self, now: datetime, time: str) -> None:
        """An impossible hour or minute gives the fixed default."""
        result = normalize_datetime("sometime soon", time, now)

        assert isinstance(result, HardDefault)
        assert result.value == datetime(2025, 3, 10, 14, 0)


class TestTo24Hour:
    """12-hour to 24-hour conversion."""

    @pytest.mark.parametrize(
        ("hour", "is_pm", "expected"),
        [
            (12, False, 0),
            (12, True, 12),
            (1, True, 13),
            (11, True, 23),
            (7, False, 7),
            (14, True, 14),
            (0, False, 0),
        ],
    )
    def test_conversion(self, hour: int, is_pm: bool, expected: int) -> None:
        """Midnight, noon and PM hours convert correctly."""
        assert to_24_hour(hour, is_pm) == expected


class TestDeterminism:
    """Same inputs, same answer."""

    def test_repeatable(self, now: datetime) -> None:
        """Two calls with the same clock agree."""
        assert normalize_datetime("", "at 3pm", now) == normalize_datetime("", "at 3pm", now)
