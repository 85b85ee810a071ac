"""Core type definitions for datecore.

This module defines the value types shared by every other module:

- ErrorKind: classification of invalid date input
- TextDirection: layout direction of a locale
- LocaleConfig: the immutable data bundle of one language/region
- LocaleDetails: registry-level facts about a registered locale
- ValidationResult: the outcome of classifying one date input

LocaleConfig accepts both snake_case and camelCase keys when built from a
mapping, so configurations written for other date libraries (``monthsShort``,
``relativeTime``, ``justNow``, ``sameDay``) can be registered unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any


# ==============================================================================
# Enums
# ==============================================================================

class ErrorKind(str, Enum):
    """Reason a date input was rejected."""
    NULL = "null"                  # None
    EMPTY = "empty"                # ""
    GENERIC = "generic"            # bool, empty sequence, unsupported type
    NAN = "nan"                    # coercible type that yields no valid date
    OUT_OF_RANGE = "out_of_range"  # more than 1000 years from the current year


class TextDirection(str, Enum):
    """Text direction for layout."""
    LTR = "ltr"
    RTL = "rtl"


# ==============================================================================
# Locale Configuration
# ==============================================================================

MONTHS_IN_YEAR = 12
DAYS_IN_WEEK = 7

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z][a-z])")

# Unit keys use single-letter case to separate minute/month (m/M); they are
# never converted.
_UNIT_KEYS = frozenset({"s", "ss", "m", "mm", "h", "hh", "d", "dd", "w", "ww", "M", "MM", "y", "yy"})


def _snake(key: str) -> str:
    if key in _UNIT_KEYS:
        return key
    return _CAMEL_RE.sub("_", key).lower()


def _freeze_mapping(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({_snake(str(k)): v for k, v in value.items()})
    return value


def _freeze_sequence(value: Any) -> Any:
    if isinstance(value, Sequence) and not isinstance(value, str):
        return tuple(value)
    return value


class LocaleConfigError(ValueError):
    """Raised when a mapping cannot be turned into a LocaleConfig."""


@dataclass(frozen=True)
class LocaleConfig:
    """Names, phrase templates and digit tables for one locale.

    Attributes:
        months: Twelve month names, January first
        months_short: Twelve abbreviated month names
        weekdays: Seven weekday names, Sunday first
        weekdays_short: Seven abbreviated weekday names
        weekdays_min: Seven minimal weekday names
        relative_time: Unit phrases (``s``..``yy``) plus ``future``,
            ``past``, ``today``, ``yesterday``, ``tomorrow``, ``just_now``
            and ``ago``
        calendar: ``same_day``, ``next_day``, ``next_week``, ``last_day``,
            ``last_week`` and ``same_else`` templates using the ``LT``,
            ``dddd`` and ``L`` placeholders
        number_map: Localized digit -> Latin digit
        symbol_map: Latin digit -> localized digit (derived from
            number_map when omitted)
        comma: List separator used between weekday and date
    """
    months: tuple[str, ...]
    months_short: tuple[str, ...]
    weekdays: tuple[str, ...]
    weekdays_short: tuple[str, ...]
    weekdays_min: tuple[str, ...]
    relative_time: Mapping[str, str]
    calendar: Mapping[str, str]
    number_map: Mapping[str, str] = field(default_factory=dict)
    symbol_map: Mapping[str, str] = field(default_factory=dict)
    comma: str = ","

    def __post_init__(self) -> None:
        for name in ("months", "months_short", "weekdays", "weekdays_short", "weekdays_min"):
            object.__setattr__(self, name, _freeze_sequence(getattr(self, name)))
        for name in ("relative_time", "calendar"):
            object.__setattr__(self, name, _freeze_mapping(getattr(self, name)))

        number_map = self.number_map if isinstance(self.number_map, Mapping) else {}
        symbol_map = self.symbol_map if isinstance(self.symbol_map, Mapping) else {}
        if number_map and not symbol_map:
            symbol_map = {latin: local for local, latin in number_map.items()}
        object.__setattr__(self, "number_map", MappingProxyType(dict(number_map)))
        object.__setattr__(self, "symbol_map", MappingProxyType(dict(symbol_map)))

    @property
    def has_custom_numerals(self) -> bool:
        """Whether the locale writes digits with non-Latin glyphs."""
        return bool(self.number_map)

    def validate(self) -> list[str]:
        """Return the list of shape problems (empty when valid)."""
        problems: list[str] = []

        expected = {
            "months": MONTHS_IN_YEAR,
            "months_short": MONTHS_IN_YEAR,
            "weekdays": DAYS_IN_WEEK,
            "weekdays_short": DAYS_IN_WEEK,
            "weekdays_min": DAYS_IN_WEEK,
        }
        for name, length in expected.items():
            value = getattr(self, name)
            if not isinstance(value, tuple):
                problems.append(f"{name} must be a sequence of {length} strings")
            elif len(value) != length:
                problems.append(f"{name} must have {length} entries, got {len(value)}")
            elif not all(isinstance(item, str) for item in value):
                problems.append(f"{name} must contain only strings")

        for name in ("relative_time", "calendar"):
            value = getattr(self, name)
            if not isinstance(value, Mapping) or not value:
                problems.append(f"{name} must be a non-empty mapping")

        if any(len(str(key)) != 1 for key in self.number_map):
            problems.append("number_map keys must be single characters")

        return problems

    def is_valid(self) -> bool:
        return not self.validate()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocaleConfig":
        """Build a config from a plain mapping.

        Raises:
            LocaleConfigError: If a required property is missing
        """
        if not isinstance(data, Mapping):
            raise LocaleConfigError(f"Locale config must be a mapping, got {type(data).__name__}")

        values = {_snake(str(key)): value for key, value in data.items()}
        required = ("months", "months_short", "weekdays", "weekdays_short",
                    "weekdays_min", "relative_time", "calendar")
        missing = [name for name in required if not values.get(name)]
        if missing:
            raise LocaleConfigError(f"Missing required properties: {', '.join(missing)}")

        optional = {
            name: values[name]
            for name in ("number_map", "symbol_map", "comma")
            if values.get(name) is not None
        }
        return cls(**{name: values[name] for name in required}, **optional)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain snake_case dictionary."""
        return {
            "months": list(self.months),
            "months_short": list(self.months_short),
            "weekdays": list(self.weekdays),
            "weekdays_short": list(self.weekdays_short),
            "weekdays_min": list(self.weekdays_min),
            "relative_time": dict(self.relative_time),
            "calendar": dict(self.calendar),
            "number_map": dict(self.number_map),
            "symbol_map": dict(self.symbol_map),
            "comma": self.comma,
        }


def coerce_locale_config(config: Any) -> LocaleConfig | None:
    """Return a valid LocaleConfig for ``config`` or None."""
    if isinstance(config, LocaleConfig):
        candidate = config
    elif isinstance(config, Mapping):
        try:
            candidate = LocaleConfig.from_dict(config)
        except (LocaleConfigError, TypeError):
            return None
    else:
        return None
    return candidate if candidate.is_valid() else None


def is_valid_locale_config(config: Any) -> bool:
    """Check whether ``config`` satisfies the locale shape contract."""
    return coerce_locale_config(config) is not None


# ==============================================================================
# Result Types
# ==============================================================================

@dataclass(frozen=True)
class LocaleDetails:
    """Registry facts about one locale code."""
    code: str
    is_builtin: bool
    is_custom: bool
    has_custom_numerals: bool
    direction: TextDirection

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "is_builtin": self.is_builtin,
            "is_custom": self.is_custom,
            "has_custom_numerals": self.has_custom_numerals,
            "direction": self.direction.value,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of classifying a date input.

    Attributes:
        is_valid: Whether the input is a usable date
        date: The normalized datetime when valid
        error: The rejection reason when invalid
        message: Human-readable rejection message
        fallback: The configured fallback date when invalid
    """
    is_valid: bool
    date: datetime | None = None
    error: ErrorKind | None = None
    message: str | None = None
    fallback: datetime | None = None
