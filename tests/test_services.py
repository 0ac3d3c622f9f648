"""Tests for services.py - time arithmetic helpers."""

import math

import pytest

from services import (
    InvalidTimeError,
    format_hours,
    hours_between,
    minutes_of,
    quarter_hours,
    time_of,
)


class TestMinutesOf:
    """Tests for HH:MM parsing."""

    def test_morning_time(self):
        assert minutes_of("09:30") == 570

    def test_midnight(self):
        assert minutes_of("00:00") == 0

    def test_single_digit_hour(self):
        assert minutes_of("7:05") == 425

    def test_duration_longer_than_a_day(self):
        assert minutes_of("25:00") == 1500

    @pytest.mark.parametrize("value", ["", "9", "09:60", "ab:cd", "09:5", "-1:00"])
    def test_malformed_input_raises(self, value):
        with pytest.raises(InvalidTimeError):
            minutes_of(value)

    def test_invalid_time_error_is_value_error(self):
        with pytest.raises(ValueError):
            minutes_of("noon")


class TestTimeOf:
    """Tests for minutes -> HH:MM formatting."""

    def test_zero_padded(self):
        assert time_of(65) == "01:05"

    def test_no_wrap_past_a_day(self):
        assert time_of(1500) == "25:00"

    def test_round_trip_over_a_day(self):
        for m in range(0, 1440):
            assert minutes_of(time_of(m)) == m


class TestHoursBetween:
    """Tests for worked hours between two clock times."""

    def test_full_day_with_break(self):
        assert hours_between("09:00", "17:00", "00:30") == 7.5

    def test_same_start_and_end(self):
        assert hours_between("09:00", "09:00", "00:00") == 0

    def test_partial_hour(self):
        assert hours_between("09:00", "10:05", "00:00") == pytest.approx(65 / 60)

    def test_matches_minute_arithmetic(self):
        start, end, pause = "08:10", "16:45", "00:45"
        expected = (minutes_of(end) - minutes_of(start) - minutes_of(pause)) / 60
        assert hours_between(start, end, pause) == pytest.approx(expected)

    def test_break_longer_than_span_clamps_to_zero(self):
        assert hours_between("09:00", "09:30", "01:00") == 0

    def test_overnight_clamps_to_zero_by_default(self):
        assert hours_between("22:00", "06:00", "00:00") == 0

    def test_overnight_wraps_when_enabled(self):
        assert hours_between("22:00", "06:00", "00:30", wrap_overnight=True) == 7.5


class TestQuarterHours:
    """Tests for rounding up to quarter hours."""

    def test_zero(self):
        assert quarter_hours(0) == 0

    def test_exact_multiple(self):
        assert quarter_hours(7.5) == 30

    def test_any_remainder_rounds_up(self):
        assert quarter_hours(1.01) == 5
        assert quarter_hours(65 / 60) == 5

    def test_matches_ceil(self):
        for h in (0.1, 0.25, 0.26, 2.0, 3.999):
            assert quarter_hours(h) == math.ceil(h * 4)


class TestFormatHours:
    """Tests for displaying hours as HH:MM."""

    def test_fractional_hours(self):
        assert format_hours(7.5) == "07:30"

    def test_rounds_to_nearest_minute(self):
        assert format_hours(65 / 60) == "01:05"
