"""Tests for remaining-time arithmetic and zero padding."""
from datetime import datetime, timedelta

import pytest

from countdown_state import RemainingTime
from processor import add_zero, compute_target, remaining_ms, split_remaining


class TestAddZero:
    @pytest.mark.parametrize("value", range(10))
    def test_single_digits_get_leading_zero(self, value):
        """0..9 render as two characters with a leading zero."""
        assert add_zero(value) == f"0{value}"
        assert len(add_zero(value)) == 2

    @pytest.mark.parametrize("value,expected", [(10, "10"), (23, "23"), (59, "59"), (123, "123")])
    def test_larger_values_render_naturally(self, value, expected):
        assert add_zero(value) == expected


class TestRemainingMs:
    def test_positive_difference(self):
        now = datetime(2024, 1, 1)
        assert remaining_ms(now + timedelta(seconds=2, milliseconds=5), now) == 2005

    def test_negative_after_target(self):
        now = datetime(2024, 1, 1)
        assert remaining_ms(now - timedelta(milliseconds=1), now) == -1

    def test_floors_sub_millisecond(self):
        """Microseconds are floored, also below zero."""
        now = datetime(2024, 1, 1)
        assert remaining_ms(now + timedelta(microseconds=1500), now) == 1
        assert remaining_ms(now - timedelta(microseconds=500), now) == -1

    def test_zero_at_target(self):
        now = datetime(2024, 1, 1)
        assert remaining_ms(now, now) == 0


class TestSplitRemaining:
    def test_one_of_each_unit(self):
        """90061000 ms is 1d 1h 1m 1s."""
        assert split_remaining(90061000) == RemainingTime(days=1, hours=1, minutes=1, seconds=1)

    def test_drops_partial_second(self):
        assert split_remaining(59999) == RemainingTime(days=0, hours=0, minutes=0, seconds=59)

    def test_zero(self):
        assert split_remaining(0) == RemainingTime(0, 0, 0, 0)

    def test_six_days(self):
        assert split_remaining(6 * 86400 * 1000) == RemainingTime(6, 0, 0, 0)

    def test_components_stay_in_range(self):
        remaining = split_remaining(86399999)
        assert remaining == RemainingTime(days=0, hours=23, minutes=59, seconds=59)

    @pytest.mark.parametrize("ms", [0, 999, 1000, 61001, 3599999, 90061000, 518400000, 987654321])
    def test_reconstitutes_whole_seconds(self, ms):
        assert split_remaining(ms).total_seconds == ms // 1000

    def test_negative_raises(self):
        with pytest.raises(ValueError):
            split_remaining(-1)


class TestRemainingTimeFormatted:
    def test_formats_every_unit(self):
        formatted = RemainingTime(days=12, hours=3, minutes=0, seconds=45).formatted()
        assert formatted == {"days": "12", "hours": "03", "minutes": "00", "seconds": "45"}


class TestComputeTarget:
    def test_adds_whole_days(self):
        now = datetime(2024, 2, 26, 8, 30)
        assert compute_target(now, 6) == datetime(2024, 3, 3, 8, 30)
