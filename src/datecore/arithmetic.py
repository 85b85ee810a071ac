"""Date arithmetic, period boundaries, calendar predicates and differences.

All functions validate their input through ``create_safe_date`` first and
work on local wall-clock time. Weeks start on Sunday.

A result outside the years ``datetime`` supports (1 to 9999) degrades to
the configured fallback date like invalid input does.

Month arithmetic keeps the day of month and lets it overflow into the
following month, e.g. ``add_months(datetime(2024, 1, 31), 1)`` is
2024-03-02 rather than the last day of February.

Nothing here depends on the formatting module; the formatting module builds
its contextual formats on these predicates.
"""

from __future__ import annotations

import calendar
import math
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from datecore.context import DateContext, resolve_context
from datecore.logging import get_logger
from datecore.protocols import ErrorKind
from datecore.validation import create_safe_date

logger = get_logger("error")

_DAY = timedelta(days=1)
_HOUR = timedelta(hours=1)
_MINUTE = timedelta(minutes=1)
_END_OF_DAY = {"hour": 23, "minute": 59, "second": 59, "microsecond": 999000}
_START_OF_DAY = {"hour": 0, "minute": 0, "second": 0, "microsecond": 0}


def weekday_index(value: datetime) -> int:
    """Day of week with 0 = Sunday."""
    return (value.weekday() + 1) % 7


def _shift_months(value: datetime, months: int) -> datetime:
    total = value.year * 12 + (value.month - 1) + months
    year, month = divmod(total, 12)
    first = value.replace(year=year, month=month + 1, day=1)
    return first + timedelta(days=value.day - 1)


# =============================================================================
# Manipulation
# =============================================================================


def _shift(value: Any, function_name: str, shift: Callable[[datetime], datetime], context: DateContext | None) -> datetime:
    ctx = resolve_context(context)
    start = create_safe_date(value, function_name, context=ctx)
    try:
        return shift(start)
    except (OverflowError, ValueError):
        config = ctx.error_config
        if config.log_errors:
            logger.error("[%s] %s: %r", function_name, config.message_for(ErrorKind.OUT_OF_RANGE), start)
        return config.fallback_date


def add_days(value: Any, days: int, *, context: DateContext | None = None) -> datetime:
    return _shift(value, "add_days", lambda d: d + timedelta(days=days), context)


def subtract_days(value: Any, days: int, *, context: DateContext | None = None) -> datetime:
    return _shift(value, "subtract_days", lambda d: d - timedelta(days=days), context)


def add_months(value: Any, months: int, *, context: DateContext | None = None) -> datetime:
    return _shift(value, "add_months", lambda d: _shift_months(d, months), context)


def subtract_months(value: Any, months: int, *, context: DateContext | None = None) -> datetime:
    return _shift(value, "subtract_months", lambda d: _shift_months(d, -months), context)


# =============================================================================
# Period Boundaries
# =============================================================================


def _start_of_week(value: datetime) -> datetime:
    return (value - timedelta(days=weekday_index(value))).replace(**_START_OF_DAY)


def _end_of_week(value: datetime) -> datetime:
    return (value + timedelta(days=6 - weekday_index(value))).replace(**_END_OF_DAY)


def start_of_day(value: Any, *, context: DateContext | None = None) -> datetime:
    return create_safe_date(value, "start_of_day", context=context).replace(**_START_OF_DAY)


def end_of_day(value: Any, *, context: DateContext | None = None) -> datetime:
    return create_safe_date(value, "end_of_day", context=context).replace(**_END_OF_DAY)


def start_of_week(value: Any, *, context: DateContext | None = None) -> datetime:
    """Sunday of the week containing ``value`` at 00:00:00.000."""
    return _start_of_week(create_safe_date(value, "start_of_week", context=context))


def end_of_week(value: Any, *, context: DateContext | None = None) -> datetime:
    """Saturday of the week containing ``value`` at 23:59:59.999."""
    return _end_of_week(create_safe_date(value, "end_of_week", context=context))


def start_of_month(value: Any, *, context: DateContext | None = None) -> datetime:
    d = create_safe_date(value, "start_of_month", context=context)
    return d.replace(day=1, **_START_OF_DAY)


def end_of_month(value: Any, *, context: DateContext | None = None) -> datetime:
    d = create_safe_date(value, "end_of_month", context=context)
    last_day = calendar.monthrange(d.year, d.month)[1]
    return d.replace(day=last_day, **_END_OF_DAY)


# =============================================================================
# Calendar Predicates
# =============================================================================


def _same_day(a: datetime, b: datetime) -> bool:
    return a.date() == b.date()


def is_today(value: Any, *, context: DateContext | None = None) -> bool:
    ctx = resolve_context(context)
    return _same_day(create_safe_date(value, "is_today", context=ctx), ctx.now())


def is_yesterday(value: Any, *, context: DateContext | None = None) -> bool:
    ctx = resolve_context(context)
    return _same_day(create_safe_date(value, "is_yesterday", context=ctx), ctx.now() - _DAY)


def is_tomorrow(value: Any, *, context: DateContext | None = None) -> bool:
    ctx = resolve_context(context)
    return _same_day(create_safe_date(value, "is_tomorrow", context=ctx), ctx.now() + _DAY)


def is_this_week(value: Any, *, context: DateContext | None = None) -> bool:
    ctx = resolve_context(context)
    target = create_safe_date(value, "is_this_week", context=ctx)
    now = ctx.now()
    return _start_of_week(now) <= target <= _end_of_week(now)


def is_this_month(value: Any, *, context: DateContext | None = None) -> bool:
    ctx = resolve_context(context)
    target = create_safe_date(value, "is_this_month", context=ctx)
    now = ctx.now()
    return (target.year, target.month) == (now.year, now.month)


def is_this_year(value: Any, *, context: DateContext | None = None) -> bool:
    ctx = resolve_context(context)
    return create_safe_date(value, "is_this_year", context=ctx).year == ctx.now().year


# =============================================================================
# Differences
# =============================================================================


def _difference(a: Any, b: Any, unit: timedelta, name: str, context: DateContext | None) -> int:
    d1 = create_safe_date(a, name, context=context)
    d2 = create_safe_date(b, name, context=context)
    return math.ceil(abs(d2 - d1) / unit)


def difference_in_days(a: Any, b: Any, *, context: DateContext | None = None) -> int:
    """Whole days between two dates, rounded up; never negative."""
    return _difference(a, b, _DAY, "difference_in_days", context)


def difference_in_hours(a: Any, b: Any, *, context: DateContext | None = None) -> int:
    return _difference(a, b, _HOUR, "difference_in_hours", context)


def difference_in_minutes(a: Any, b: Any, *, context: DateContext | None = None) -> int:
    return _difference(a, b, _MINUTE, "difference_in_minutes", context)


# =============================================================================
# Timestamps
# =============================================================================


def now(*, context: DateContext | None = None) -> int:
    """Current POSIX time in milliseconds (from the context clock)."""
    return math.floor(resolve_context(context).now().timestamp() * 1000)


def unix(value: Any, *, context: DateContext | None = None) -> int:
    """POSIX timestamp of ``value`` in whole seconds."""
    return math.floor(create_safe_date(value, "unix", context=context).timestamp())
