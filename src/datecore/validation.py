"""Date input validation.

Every datecore operation funnels its input through ``create_safe_date``,
which classifies the input and substitutes the configured fallback date for
anything invalid. Classification order matters because some inputs pass
several superficial checks:

1. ``None``                                   -> ErrorKind.NULL
2. ``""``                                     -> ErrorKind.EMPTY
3. bool, empty list/tuple, unsupported type   -> ErrorKind.GENERIC
4. coercion yields no date                    -> ErrorKind.NAN
5. more than 1000 years from the current year -> ErrorKind.OUT_OF_RANGE

Dates beyond what ``datetime`` can hold (huge timestamps, UTC offsets that
push past year 1 or 9999) are OUT_OF_RANGE as well.

Coercible inputs are ``datetime`` (aware values converted to local time),
``date`` (midnight), POSIX timestamps in seconds, ISO 8601 strings,
``numpy.datetime64`` and objects with a ``to_pydatetime()`` method.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from numbers import Real
from typing import Any

import numpy as np

from datecore.context import DateContext, resolve_context
from datecore.logging import get_logger
from datecore.protocols import ErrorKind, ValidationResult

logger = get_logger("error")

MAX_YEAR_DISTANCE = 1000


class _NotCoercible(Exception):
    """Input type has no date interpretation."""


class _BeyondRange(Exception):
    """Input denotes a date outside what ``datetime`` can represent."""


def _to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is not None and value.utcoffset() is not None:
        try:
            return value.astimezone().replace(tzinfo=None)
        except (OverflowError, ValueError):
            raise _BeyondRange(value) from None
    return value.replace(tzinfo=None)


def _from_timestamp(value: Any) -> datetime | None:
    try:
        seconds = float(value)
    except OverflowError:
        raise _BeyondRange(value) from None
    if not math.isfinite(seconds):
        return None
    try:
        return datetime.fromtimestamp(seconds)
    except (OverflowError, OSError, ValueError):
        raise _BeyondRange(value) from None


def _from_string(text: str) -> datetime | None:
    text = text.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return _to_local_naive(datetime.fromisoformat(text))
    except ValueError:
        return None


def _from_datetime64(value: np.datetime64) -> datetime | None:
    if np.isnat(value):
        return None
    converted = value.astype("datetime64[us]").item()
    if isinstance(converted, datetime):
        return converted
    if isinstance(converted, date):
        return datetime.combine(converted, time.min)
    # numpy returns a plain int for years outside 1..9999
    raise _BeyondRange(value)


def coerce_date(value: Any) -> datetime | None:
    """Construct a naive local datetime from ``value``.

    Returns:
        The datetime, or None when the type is supported but the value
        does not denote a date

    Raises:
        _NotCoercible: If the type has no date interpretation
        _BeyondRange: If the value is a date ``datetime`` cannot hold
    """
    if isinstance(value, datetime):
        return _to_local_naive(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, np.datetime64):
        return _from_datetime64(value)
    if isinstance(value, (Real, np.integer, np.floating)):
        return _from_timestamp(value)
    if isinstance(value, str):
        return _from_string(value)
    to_pydatetime = getattr(value, "to_pydatetime", None)
    if callable(to_pydatetime):
        converted = to_pydatetime()
        if isinstance(converted, datetime):
            return _to_local_naive(converted)
        return None
    raise _NotCoercible(type(value).__name__)


def _classify(value: Any, now: datetime) -> tuple[ErrorKind | None, datetime | None]:
    if value is None:
        return ErrorKind.NULL, None
    if isinstance(value, str) and value == "":
        return ErrorKind.EMPTY, None
    if isinstance(value, (bool, np.bool_)) or (isinstance(value, (list, tuple)) and len(value) == 0):
        return ErrorKind.GENERIC, None

    try:
        parsed = coerce_date(value)
    except _NotCoercible:
        return ErrorKind.GENERIC, None
    except _BeyondRange:
        return ErrorKind.OUT_OF_RANGE, None
    if parsed is None:
        return ErrorKind.NAN, None

    if abs(parsed.year - now.year) > MAX_YEAR_DISTANCE:
        return ErrorKind.OUT_OF_RANGE, None
    return None, parsed


def validate_date(
    value: Any,
    function_name: str = "unknown",
    *,
    context: DateContext | None = None,
) -> ValidationResult:
    """Classify ``value`` as a valid date or a specific rejection.

    Rejections are logged (when ``log_errors`` is enabled) with the calling
    function's name and the offending input.
    """
    ctx = resolve_context(context)
    kind, parsed = _classify(value, ctx.now())
    if kind is None:
        return ValidationResult(is_valid=True, date=parsed)

    config = ctx.error_config
    message = config.message_for(kind)
    if config.log_errors:
        logger.error("[%s] %s: %r", function_name, message, value)
    return ValidationResult(
        is_valid=False,
        error=kind,
        message=message,
        fallback=config.fallback_date,
    )


def create_safe_date(
    value: Any,
    function_name: str = "unknown",
    *,
    context: DateContext | None = None,
) -> datetime:
    """Return the validated date or the configured fallback date."""
    result = validate_date(value, function_name, context=context)
    if result.is_valid:
        return result.date
    return result.fallback


def is_valid_date(value: Any, *, context: DateContext | None = None) -> bool:
    return validate_date(value, "is_valid_date", context=context).is_valid


def get_date_validation_info(value: Any, *, context: DateContext | None = None) -> ValidationResult:
    return validate_date(value, "get_date_validation_info", context=context)


def parse_date(value: Any, *, context: DateContext | None = None) -> datetime | None:
    """Parse ``value`` without fallback substitution (None when invalid)."""
    result = validate_date(value, "parse_date", context=context)
    return result.date if result.is_valid else None
