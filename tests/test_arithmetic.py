"""Tests for date arithmetic, boundaries, predicates and differences."""

import logging
import math
from datetime import datetime, timedelta

import pytest

from datecore import (
    add_days,
    add_months,
    difference_in_days,
    difference_in_hours,
    difference_in_minutes,
    end_of_day,
    end_of_month,
    end_of_week,
    is_this_month,
    is_this_week,
    is_this_year,
    is_today,
    is_tomorrow,
    is_yesterday,
    now,
    start_of_day,
    start_of_month,
    start_of_week,
    subtract_days,
    subtract_months,
    unix,
)
from datecore.arithmetic import weekday_index


class TestManipulation:
    """Tests for adding and subtracting units."""

    def test_add_and_subtract_days(self, ctx):
        value = datetime(2024, 2, 28, 10, 0)
        assert add_days(value, 2, context=ctx) == datetime(2024, 3, 1, 10, 0)
        assert subtract_days(value, 28, context=ctx) == datetime(2024, 1, 31, 10, 0)

    def test_add_months(self, ctx):
        assert add_months(datetime(2024, 1, 15), 1, context=ctx) == datetime(2024, 2, 15)
        assert add_months(datetime(2024, 11, 15), 3, context=ctx) == datetime(2025, 2, 15)

    def test_add_months_overflows(self, ctx):
        """The day of month overflows into the next month."""
        assert add_months(datetime(2024, 1, 31), 1, context=ctx) == datetime(2024, 3, 2)
        assert add_months(datetime(2023, 1, 31), 1, context=ctx) == datetime(2023, 3, 3)

    def test_subtract_months(self, ctx):
        assert subtract_months(datetime(2024, 3, 15, 8, 30), 3, context=ctx) == datetime(2023, 12, 15, 8, 30)
        assert subtract_months(datetime(2024, 3, 31), 1, context=ctx) == datetime(2024, 3, 2)

    def test_input_is_not_mutated(self, ctx):
        value = datetime(2024, 1, 15)
        add_days(value, 5, context=ctx)
        assert value == datetime(2024, 1, 15)

    def test_invalid_input_uses_fallback(self, ctx):
        ctx.error_config.configure(log_errors=False)
        fallback = ctx.error_config.fallback_date
        assert add_days(None, 1, context=ctx) == fallback + timedelta(days=1)

    @pytest.mark.parametrize(
        ("operation", "amount"),
        [
            (add_days, 3_000_000),
            (subtract_days, 3_000_000),
            (add_days, 10**10),
            (add_months, 100_000),
            (subtract_months, 100_000),
        ],
    )
    def test_result_beyond_supported_years_uses_fallback(self, ctx, operation, amount):
        """Shifting past year 1 or 9999 degrades to the fallback date."""
        ctx.error_config.configure(log_errors=False)
        assert operation(datetime(2024, 1, 1), amount, context=ctx) == ctx.error_config.fallback_date

    def test_result_beyond_supported_years_is_logged(self, ctx, caplog):
        with caplog.at_level(logging.ERROR, logger="datecore"):
            add_days(datetime(2024, 1, 1), 3_000_000, context=ctx)
        records = [r for r in caplog.records if r.name == "datecore.error"]
        assert len(records) == 1
        message = records[0].getMessage()
        assert "[add_days]" in message
        assert "Date is out of valid range" in message


class TestBoundaries:
    """Tests for period boundaries."""

    def test_day(self, ctx):
        value = datetime(2024, 1, 17, 15, 45, 12, 345)
        assert start_of_day(value, context=ctx) == datetime(2024, 1, 17)
        assert end_of_day(value, context=ctx) == datetime(2024, 1, 17, 23, 59, 59, 999000)

    def test_week_starts_sunday(self, ctx):
        value = datetime(2024, 1, 17, 15, 45)  # Wednesday
        assert start_of_week(value, context=ctx) == datetime(2024, 1, 14)
        assert end_of_week(value, context=ctx) == datetime(2024, 1, 20, 23, 59, 59, 999000)

    def test_week_on_sunday_and_saturday(self, ctx):
        assert start_of_week(datetime(2024, 1, 14, 9), context=ctx) == datetime(2024, 1, 14)
        assert start_of_week(datetime(2024, 1, 20, 9), context=ctx) == datetime(2024, 1, 14)

    def test_week_across_month(self, ctx):
        assert start_of_week(datetime(2024, 3, 1), context=ctx) == datetime(2024, 2, 25)
        assert end_of_week(datetime(2024, 3, 1), context=ctx).date() == datetime(2024, 3, 2).date()

    def test_month(self, ctx):
        assert start_of_month(datetime(2024, 2, 17, 8), context=ctx) == datetime(2024, 2, 1)
        assert end_of_month(datetime(2024, 2, 17, 8), context=ctx) == datetime(2024, 2, 29, 23, 59, 59, 999000)
        assert end_of_month(datetime(2023, 12, 5), context=ctx).day == 31

    def test_weekday_index(self):
        assert weekday_index(datetime(2024, 1, 14)) == 0
        assert weekday_index(datetime(2024, 1, 15)) == 1
        assert weekday_index(datetime(2024, 1, 20)) == 6


class TestPredicates:
    """Tests for calendar predicates (now is Wednesday 2024-01-17 12:00)."""

    def test_today_is_calendar_day(self, ctx):
        assert is_today(datetime(2024, 1, 17, 0, 0), context=ctx)
        assert is_today(datetime(2024, 1, 17, 23, 59), context=ctx)
        assert not is_today(datetime(2024, 1, 16, 23, 59), context=ctx)

    def test_yesterday_and_tomorrow(self, ctx):
        assert is_yesterday(datetime(2024, 1, 16, 1, 0), context=ctx)
        assert is_tomorrow(datetime(2024, 1, 18, 23, 0), context=ctx)
        assert not is_yesterday(datetime(2024, 1, 17), context=ctx)
        assert not is_tomorrow(datetime(2024, 1, 19), context=ctx)

    def test_this_week_is_inclusive(self, ctx):
        assert is_this_week(datetime(2024, 1, 14, 0, 0), context=ctx)
        assert is_this_week(datetime(2024, 1, 20, 23, 59, 59), context=ctx)
        assert not is_this_week(datetime(2024, 1, 13, 23, 59), context=ctx)
        assert not is_this_week(datetime(2024, 1, 21), context=ctx)

    def test_this_month_and_year(self, ctx):
        assert is_this_month(datetime(2024, 1, 1), context=ctx)
        assert not is_this_month(datetime(2023, 1, 17), context=ctx)
        assert is_this_year(datetime(2024, 12, 31), context=ctx)
        assert not is_this_year(datetime(2023, 12, 31), context=ctx)

    def test_string_input(self, ctx):
        assert is_today("2024-01-17", context=ctx)


class TestDifferences:
    """Tests for rounded-up differences."""

    def test_days_round_up(self, ctx):
        """A 22-hour span counts as one day."""
        a = datetime(2024, 1, 15, 23, 0)
        b = datetime(2024, 1, 15, 1, 0)
        assert difference_in_days(a, b, context=ctx) == 1

    def test_days_exact(self, ctx):
        assert difference_in_days(datetime(2024, 1, 1), datetime(2024, 1, 11), context=ctx) == 10
        assert difference_in_days(datetime(2024, 1, 1), datetime(2024, 1, 1), context=ctx) == 0

    def test_hours_and_minutes(self, ctx):
        a = datetime(2024, 1, 15, 10, 0)
        b = datetime(2024, 1, 15, 12, 30, 1)
        assert difference_in_hours(a, b, context=ctx) == 3
        assert difference_in_minutes(a, b, context=ctx) == 151

    @pytest.mark.parametrize(
        ("a", "b"),
        [
            (datetime(2024, 1, 15, 23, 0), datetime(2024, 1, 15, 1, 0)),
            (datetime(2020, 2, 29), datetime(2024, 3, 1, 5, 5)),
            (datetime(2024, 1, 1), datetime(2023, 12, 31, 23, 59, 59)),
        ],
    )
    def test_symmetry(self, ctx, a, b):
        assert difference_in_days(a, b, context=ctx) == difference_in_days(b, a, context=ctx)
        assert difference_in_hours(a, b, context=ctx) == difference_in_hours(b, a, context=ctx)
        assert difference_in_minutes(a, b, context=ctx) >= 0


class TestTimestamps:
    """Tests for now() and unix()."""

    def test_now_uses_context_clock(self, ctx, fixed_now):
        assert now(context=ctx) == math.floor(fixed_now.timestamp() * 1000)

    def test_unix(self, ctx):
        value = datetime.fromtimestamp(1_700_000_000)
        assert unix(value, context=ctx) == 1_700_000_000

    def test_unix_floors(self, ctx):
        value = datetime.fromtimestamp(1_700_000_000) + timedelta(milliseconds=900)
        assert unix(value, context=ctx) == 1_700_000_000
