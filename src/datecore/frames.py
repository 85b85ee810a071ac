"""Polars helpers for formatting and validating date columns.

Each helper runs a datecore operation over every element of a
``polars.Series`` and returns a new series with the same name, so a date
column can be rendered in a locale without leaving the dataframe:

    df.with_columns(format_series(df["created"], "format_date_localized", locale="ar"))
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import polars as pl

from datecore import formatting
from datecore.context import DateContext, resolve_context
from datecore.validation import is_valid_date, parse_date

# Formatters that accept the ``locale`` keyword
_LOCALIZED = frozenset({
    "format_date_localized",
    "format_time_localized",
    "format_date_time_localized",
    "format_long_date",
    "format_date_smart",
    "format_calendar",
    "get_day_name",
    "get_month_name",
    "get_relative_time_localized",
    "get_relative_time_enhanced",
})

FORMATTERS: dict[str, Callable[..., str]] = {
    name: getattr(formatting, name)
    for name in (
        "format_date",
        "format_date_ddmmyyyy",
        "format_date_mmddyyyy",
        "format_time",
        "format_date_time",
        "get_relative_time",
        *sorted(_LOCALIZED),
    )
}


def get_formatter(name: str) -> Callable[..., str]:
    """Look up a formatting operation by name.

    Raises:
        KeyError: If ``name`` is not a known formatter
    """
    try:
        return FORMATTERS[name]
    except KeyError:
        available = ", ".join(sorted(FORMATTERS))
        raise KeyError(f"Unknown formatter: {name}. Available: {available}") from None


def format_series(
    series: pl.Series,
    formatter: str = "format_date",
    *,
    context: DateContext | None = None,
    **options: Any,
) -> pl.Series:
    """Format every element of ``series``.

    Args:
        series: Series of dates (Datetime, Date, string or numeric)
        formatter: Name of a formatting function, e.g. ``format_date_localized``
        context: Formatting context (default: process-wide context)
        **options: Extra keywords for the formatter (``locale``, ``format``)

    Returns:
        Utf8 series; null and invalid elements hold the fallback output
    """
    func = get_formatter(formatter)
    if "locale" in options and formatter not in _LOCALIZED:
        raise TypeError(f"{formatter} does not accept a locale")
    ctx = resolve_context(context)
    values = [func(value, context=ctx, **options) for value in series.to_list()]
    return pl.Series(series.name, values, dtype=pl.Utf8)


def parse_series(series: pl.Series, *, context: DateContext | None = None) -> pl.Series:
    """Parse every element of ``series``; invalid elements become null."""
    ctx = resolve_context(context)
    values = [parse_date(value, context=ctx) for value in series.to_list()]
    return pl.Series(series.name, values, dtype=pl.Datetime("us"))


def validate_series(series: pl.Series, *, context: DateContext | None = None) -> pl.Series:
    """Boolean series marking which elements are valid dates."""
    ctx = resolve_context(context)
    values = [is_valid_date(value, context=ctx) for value in series.to_list()]
    return pl.Series(series.name, values, dtype=pl.Boolean)
