"""Locale-aware date formatting.

Provides:
- Fixed, locale-independent formats (``YYYY-MM-DD``, ``DD/MM/YYYY``,
  ``MM/DD/YYYY``, ``HH:MM``)
- Localized dates and times (short, weekday and long date formats; 12-hour
  or 24-hour time)
- Long-date tokens (``LT``, ``LTS``, ``L``, ``LL``, ``LLL``, ``LLLL``)
- Contextual formats (smart display and calendar phrases)
- Day and month names
- Relative time ("3 days ago")

Formatting never raises for bad input: every function validates through
``create_safe_date`` and formats the configured fallback date instead.
Localized output has its digits rewritten for locales with a digit table.

Usage:
    from datecore.formatting import format_date_localized, get_relative_time_localized

    format_date_localized(datetime(2024, 1, 15, 14, 30), locale="en")
    # -> "15 January 2024"

    format_time_localized(datetime(2024, 1, 15, 14, 30), locale="ar")
    # -> "١٤:٣٠"
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Any

from datecore.arithmetic import (
    is_this_week,
    is_this_year,
    is_today,
    is_tomorrow,
    is_yesterday,
    weekday_index,
)
from datecore.context import DateContext, resolve_context
from datecore.locales import en as _english
from datecore.numerals import localize_digits
from datecore.protocols import LocaleConfig
from datecore.registry import language_of
from datecore.validation import create_safe_date


# ==============================================================================
# Relative Time Data
# ==============================================================================

# (unit name, singular key, length in seconds), longest first
RELATIVE_TIME_UNITS: tuple[tuple[str, str, int], ...] = (
    ("year", "y", 31_536_000),
    ("month", "M", 2_592_000),
    ("week", "w", 604_800),
    ("day", "d", 86_400),
    ("hour", "h", 3_600),
    ("minute", "m", 60),
    ("second", "s", 1),
)


def _relative_phrase(config: LocaleConfig, key: str) -> str:
    phrase = config.relative_time.get(key)
    if phrase is None:
        phrase = _english.relative_time[key]
    return phrase


def _calendar_template(config: LocaleConfig, key: str) -> str:
    template = config.calendar.get(key)
    if template is None:
        template = _english.calendar[key]
    return template


def _elapsed_seconds(target: datetime, now: datetime) -> int:
    return math.floor((now - target).total_seconds())


# ==============================================================================
# Fixed Formats
# ==============================================================================

def format_date(value: Any, *, context: DateContext | None = None) -> str:
    """Canonical ``YYYY-MM-DD`` (Latin digits, locale-independent)."""
    d = create_safe_date(value, "format_date", context=context)
    return f"{d.year}-{d.month:02d}-{d.day:02d}"


def format_date_ddmmyyyy(value: Any, *, context: DateContext | None = None) -> str:
    d = create_safe_date(value, "format_date_ddmmyyyy", context=context)
    return f"{d.day:02d}/{d.month:02d}/{d.year}"


def format_date_mmddyyyy(value: Any, *, context: DateContext | None = None) -> str:
    d = create_safe_date(value, "format_date_mmddyyyy", context=context)
    return f"{d.month:02d}/{d.day:02d}/{d.year}"


def format_time(value: Any, *, context: DateContext | None = None) -> str:
    """24-hour ``HH:MM``."""
    d = create_safe_date(value, "format_time", context=context)
    return f"{d.hour:02d}:{d.minute:02d}"


def format_date_time(value: Any, *, context: DateContext | None = None) -> str:
    return f"{format_date(value, context=context)} {format_time(value, context=context)}"


# ==============================================================================
# Localized Formats
# ==============================================================================

def format_date_localized(
    value: Any,
    *,
    locale: str | None = None,
    format: str = "long",
    context: DateContext | None = None,
) -> str:
    """Format a date with localized month and weekday names.

    Args:
        value: Date to format
        locale: Locale code (default: current locale)
        format: ``short`` -> "15 Jan 2024", ``weekday`` ->
            "Monday, 15 January 2024", anything else -> "15 January 2024"
    """
    ctx = resolve_context(context)
    d = create_safe_date(value, "format_date_localized", context=ctx)
    config = ctx.resolve_locale(locale)
    month = d.month - 1

    if format == "short":
        result = f"{d.day} {config.months_short[month]} {d.year}"
    elif format == "weekday":
        weekday = config.weekdays[weekday_index(d)]
        result = f"{weekday}{config.comma} {d.day} {config.months[month]} {d.year}"
    else:
        result = f"{d.day} {config.months[month]} {d.year}"

    return localize_digits(result, config)


def format_time_localized(
    value: Any,
    *,
    locale: str | None = None,
    context: DateContext | None = None,
) -> str:
    """24-hour ``HH:MM`` for Arabic, ``H:MM AM/PM`` for every other locale."""
    ctx = resolve_context(context)
    d = create_safe_date(value, "format_time_localized", context=ctx)
    config = ctx.resolve_locale(locale)
    if locale:
        twenty_four_hour = language_of(locale) == "ar"
    else:
        twenty_four_hour = ctx.registry.is_arabic()

    if twenty_four_hour:
        result = f"{d.hour:02d}:{d.minute:02d}"
    else:
        meridiem = "PM" if d.hour >= 12 else "AM"
        result = f"{d.hour % 12 or 12}:{d.minute:02d} {meridiem}"

    return localize_digits(result, config)


def format_date_time_localized(
    value: Any,
    *,
    locale: str | None = None,
    context: DateContext | None = None,
) -> str:
    date_part = format_date_localized(value, locale=locale, context=context)
    time_part = format_time_localized(value, locale=locale, context=context)
    return f"{date_part} {time_part}"


def format_long_date(
    value: Any,
    *,
    locale: str | None = None,
    format: str = "LL",
    context: DateContext | None = None,
) -> str:
    """Format with a long-date token.

    ===== ==================================
    LT    14:30
    LTS   14:30:05
    L     15/01/2024
    LL    15 January 2024
    LLL   15 January 2024 14:30
    LLLL  Monday 15 January 2024 14:30
    ===== ==================================

    Unknown tokens format like ``LL``.
    """
    ctx = resolve_context(context)
    d = create_safe_date(value, "format_long_date", context=ctx)
    config = ctx.resolve_locale(locale)

    month_name = config.months[d.month - 1]
    clock = f"{d.hour:02d}:{d.minute:02d}"
    long_date = f"{d.day} {month_name} {d.year}"

    if format == "LT":
        result = clock
    elif format == "LTS":
        result = f"{clock}:{d.second:02d}"
    elif format == "L":
        result = f"{d.day:02d}/{d.month:02d}/{d.year}"
    elif format == "LLL":
        result = f"{long_date} {clock}"
    elif format == "LLLL":
        result = f"{config.weekdays[weekday_index(d)]} {long_date} {clock}"
    else:
        result = long_date

    return localize_digits(result, config)


# ==============================================================================
# Names
# ==============================================================================

def get_day_name(
    value: Any,
    *,
    locale: str | None = None,
    format: str = "long",
    context: DateContext | None = None,
) -> str:
    """Weekday name; ``format`` is ``long``, ``short`` or ``min``."""
    ctx = resolve_context(context)
    d = create_safe_date(value, "get_day_name", context=ctx)
    config = ctx.resolve_locale(locale)
    index = weekday_index(d)

    if format == "short":
        result = config.weekdays_short[index]
    elif format == "min":
        result = config.weekdays_min[index]
    else:
        result = config.weekdays[index]
    return localize_digits(result, config)


def get_month_name(
    value: Any,
    *,
    locale: str | None = None,
    format: str = "long",
    context: DateContext | None = None,
) -> str:
    """Month name; ``format`` is ``long`` or ``short``."""
    ctx = resolve_context(context)
    d = create_safe_date(value, "get_month_name", context=ctx)
    config = ctx.resolve_locale(locale)

    names = config.months_short if format == "short" else config.months
    return localize_digits(names[d.month - 1], config)


# ==============================================================================
# Contextual Formats
# ==============================================================================

def format_date_smart(
    value: Any,
    *,
    locale: str | None = None,
    context: DateContext | None = None,
) -> str:
    """Today/Yesterday/Tomorrow, then weekday name, then short or long date.

    The checks run in that order; "today" must win over "this week".
    """
    ctx = resolve_context(context)
    target = create_safe_date(value, "format_date_smart", context=ctx)
    config = ctx.resolve_locale(locale)

    if is_today(target, context=ctx):
        return _relative_phrase(config, "today")
    elif is_yesterday(target, context=ctx):
        return _relative_phrase(config, "yesterday")
    elif is_tomorrow(target, context=ctx):
        return _relative_phrase(config, "tomorrow")
    elif is_this_week(target, context=ctx):
        return get_day_name(target, locale=locale, format="long", context=ctx)
    elif is_this_year(target, context=ctx):
        return format_date_localized(target, locale=locale, format="short", context=ctx)
    else:
        return format_date_localized(target, locale=locale, format="long", context=ctx)


def format_calendar(
    value: Any,
    *,
    locale: str | None = None,
    context: DateContext | None = None,
) -> str:
    """Calendar phrase such as "Tomorrow at 9:00 AM" or "Friday at 2:30 PM".

    Dates outside today/tomorrow/yesterday/this week use the ``L`` format.
    """
    ctx = resolve_context(context)
    target = create_safe_date(value, "format_calendar", context=ctx)
    config = ctx.resolve_locale(locale)

    if is_today(target, context=ctx):
        template = _calendar_template(config, "same_day")
    elif is_tomorrow(target, context=ctx):
        template = _calendar_template(config, "next_day")
    elif is_yesterday(target, context=ctx):
        template = _calendar_template(config, "last_day")
    elif is_this_week(target, context=ctx):
        template = _calendar_template(config, "next_week").replace(
            "dddd", get_day_name(target, locale=locale, context=ctx), 1
        )
    else:
        return format_long_date(target, locale=locale, format="L", context=ctx)

    return template.replace("LT", format_time_localized(target, locale=locale, context=ctx), 1)


# ==============================================================================
# Relative Time
# ==============================================================================

def get_relative_time(value: Any, *, context: DateContext | None = None) -> str:
    """English "N units ago"; "just now" under one second and for the future."""
    ctx = resolve_context(context)
    target = create_safe_date(value, "get_relative_time", context=ctx)
    elapsed = _elapsed_seconds(target, ctx.now())

    for unit, _key, seconds in RELATIVE_TIME_UNITS:
        count = elapsed // seconds
        if count >= 1:
            name = unit if count == 1 else f"{unit}s"
            return f"{count} {name} ago"
    return "just now"


def _unit_text(config: LocaleConfig, unit: str, key: str, count: int) -> str:
    relative = config.relative_time
    chosen = key if count == 1 else key * 2
    phrase = relative.get(chosen) or relative.get(key) or unit
    if "%d" in phrase:
        text = phrase.replace("%d", str(count))
    else:
        text = f"{count} {phrase}"
    ago = relative.get("ago", "")
    return f"{text} {ago}".strip() if ago else text


def get_relative_time_localized(
    value: Any,
    *,
    locale: str | None = None,
    context: DateContext | None = None,
) -> str:
    """Localized "N units ago".

    Quantity 1 uses the singular key (``m``), anything larger the plural
    key (``mm``). Under one second the locale's ``just_now`` phrase is
    returned unchanged.
    """
    ctx = resolve_context(context)
    target = create_safe_date(value, "get_relative_time_localized", context=ctx)
    config = ctx.resolve_locale(locale)
    elapsed = _elapsed_seconds(target, ctx.now())

    for unit, key, seconds in RELATIVE_TIME_UNITS:
        count = elapsed // seconds
        if count >= 1:
            return localize_digits(_unit_text(config, unit, key, count), config)
    return _relative_phrase(config, "just_now")


def get_relative_time_enhanced(
    value: Any,
    *,
    locale: str | None = None,
    context: DateContext | None = None,
) -> str:
    """Relative time with today/yesterday/tomorrow phrases for ±1 day."""
    ctx = resolve_context(context)
    target = create_safe_date(value, "get_relative_time_enhanced", context=ctx)
    config = ctx.resolve_locale(locale)
    diff_in_days = math.floor((ctx.now() - target) / timedelta(days=1))

    if diff_in_days == 0:
        if is_today(target, context=ctx):
            return _relative_phrase(config, "today")
    elif diff_in_days == 1:
        return _relative_phrase(config, "yesterday")
    elif diff_in_days == -1:
        return _relative_phrase(config, "tomorrow")

    return get_relative_time_localized(target, locale=locale, context=ctx)
