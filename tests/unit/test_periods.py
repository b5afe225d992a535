"""Unit tests for monthly windows."""

from datetime import datetime, timedelta, timezone

import pytest

from spendwarden.budgeting.periods import calendar_month, month_to_date, resolve_month


class TestMonthToDate:
    def test_starts_on_first_instant_and_ends_now(self):
        now = datetime(2026, 10, 19, 14, 30, tzinfo=timezone.utc)

        window = month_to_date(now)

        assert window.start == datetime(2026, 10, 1, tzinfo=timezone.utc)
        assert window.end == now
        assert (window.year, window.month) == (2026, 10)

    def test_naive_now_is_treated_as_utc(self):
        window = month_to_date(datetime(2026, 3, 5, 8, 0))

        assert window.start == datetime(2026, 3, 1, tzinfo=timezone.utc)
        assert window.end.tzinfo is not None

    def test_first_instant_of_month_is_inside_window(self):
        now = datetime(2026, 10, 1, 0, 0, tzinfo=timezone.utc)

        window = month_to_date(now)

        assert now in window

    def test_uses_configured_timezone_for_month_boundary(self):
        # 20:00 UTC on Oct 31 is already Nov 1 in Kolkata (UTC+5:30).
        now = datetime(2026, 10, 31, 20, 0, tzinfo=timezone.utc)

        window = month_to_date(now, tz_name="Asia/Kolkata")

        assert (window.year, window.month) == (2026, 11)
        assert window.start == datetime(2026, 10, 31, 18, 30, tzinfo=timezone.utc)

    def test_defaults_to_current_time(self):
        before = datetime.now(timezone.utc)
        window = month_to_date()

        assert window.end >= before
        assert window.start <= window.end
        assert window.start.day == 1


class TestCalendarMonth:
    def test_end_is_last_microsecond_of_last_day(self):
        window = calendar_month(2026, 4)

        assert window.start == datetime(2026, 4, 1, tzinfo=timezone.utc)
        assert window.end == datetime(2026, 4, 30, 23, 59, 59, 999999, tzinfo=timezone.utc)

    def test_leap_february(self):
        window = calendar_month(2028, 2)

        assert window.end.date().day == 29

    def test_december_rolls_into_next_year(self):
        window = calendar_month(2026, 12)

        assert window.end + timedelta(microseconds=1) == datetime(2027, 1, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month):
        with pytest.raises(ValueError):
            calendar_month(2026, month)


class TestResolveMonth:
    def test_explicit_month_and_year(self):
        window = resolve_month(2, 2025, now=datetime(2026, 10, 19, tzinfo=timezone.utc))

        assert (window.year, window.month) == (2025, 2)

    def test_defaults_to_month_containing_now(self):
        window = resolve_month(now=datetime(2026, 10, 19, tzinfo=timezone.utc))

        assert (window.year, window.month) == (2026, 10)
        assert window.end.day == 31

    def test_month_only_uses_current_year(self):
        window = resolve_month(month=1, now=datetime(2026, 10, 19, tzinfo=timezone.utc))

        assert (window.year, window.month) == (2026, 1)

    def test_year_only_keeps_current_month_number(self):
        window = resolve_month(year=2025, now=datetime(2026, 10, 19, tzinfo=timezone.utc))

        assert (window.year, window.month) == (2025, 10)
        assert window.start == datetime(2025, 10, 1, tzinfo=timezone.utc)
