"""Formatting context: the state every datecore operation reads.

A DateContext bundles the locale registry, the error-handling configuration
and the clock. Every public operation takes an optional ``context=``
keyword; without it the process-wide default context is used, so simple
applications never see this module while servers can give each tenant or
request an isolated context.

Example:
    >>> from datecore import format_date_localized
    >>> ctx = DateContext()
    >>> ctx.registry.set_current("ar")
    True
    >>> format_date_localized("2024-01-15", context=ctx)
    '١٥ يناير ٢٠٢٤'
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from datecore.config import ErrorHandlingConfig
from datecore.locales import DEFAULT_LOCALE
from datecore.logging import get_logger
from datecore.protocols import ErrorKind, LocaleConfig, LocaleDetails
from datecore.registry import LocaleRegistry

logger = get_logger("init")


@dataclass
class DateContext:
    """Locale registry, error handling and clock for a set of operations.

    Attributes:
        registry: Locale registry used for resolution
        error_config: Fallback and logging settings for invalid input
        clock: Zero-argument callable returning the current local time
        initialized: Set by ``initialize_app``
    """

    registry: LocaleRegistry = field(default_factory=LocaleRegistry)
    error_config: ErrorHandlingConfig = field(default_factory=ErrorHandlingConfig)
    clock: Callable[[], datetime] = datetime.now
    initialized: bool = False

    def __post_init__(self) -> None:
        if self.registry is None:
            self.registry = LocaleRegistry()
        if self.error_config is None:
            self.error_config = ErrorHandlingConfig()

    def now(self) -> datetime:
        return self.clock()

    def resolve_locale(self, code: str | None = None) -> LocaleConfig:
        return self.registry.resolve(code)


_default_context: DateContext | None = None
_context_lock = threading.Lock()


def get_default_context() -> DateContext:
    """Get the process-wide context, creating it on first use."""
    global _default_context
    if _default_context is None:
        with _context_lock:
            if _default_context is None:
                _default_context = DateContext()
    return _default_context


def set_default_context(context: DateContext) -> None:
    global _default_context
    with _context_lock:
        _default_context = context


def reset_default_context() -> None:
    """Discard the process-wide context (a fresh one is built on next use)."""
    global _default_context
    with _context_lock:
        _default_context = None


def resolve_context(context: DateContext | None) -> DateContext:
    return context if context is not None else get_default_context()


@contextmanager
def locale_context(code: str, context: DateContext | None = None) -> Iterator[DateContext]:
    """Temporarily switch the current locale.

    Example:
        with locale_context("ar"):
            format_date_localized(value)  # Arabic
        # previous locale restored
    """
    ctx = resolve_context(context)
    previous = ctx.registry.current
    ctx.registry.set_current(code)
    try:
        yield ctx
    finally:
        ctx.registry.set_current(previous)


# =============================================================================
# Locale Registry Shortcuts
# =============================================================================


def init_locale(code: str = DEFAULT_LOCALE, *, context: DateContext | None = None) -> bool:
    return resolve_context(context).registry.init_locale(code)


def set_locale(code: str, *, context: DateContext | None = None) -> bool:
    return resolve_context(context).registry.set_current(code)


def get_current_locale(*, context: DateContext | None = None) -> str:
    return resolve_context(context).registry.current


def is_valid_locale(code: str, *, context: DateContext | None = None) -> bool:
    return resolve_context(context).registry.is_valid_locale(code)


def is_arabic(*, context: DateContext | None = None) -> bool:
    return resolve_context(context).registry.is_arabic()


def is_english(*, context: DateContext | None = None) -> bool:
    return resolve_context(context).registry.is_english()


def get_available_locales(*, context: DateContext | None = None) -> list[str]:
    return resolve_context(context).registry.get_available_locales()


def register_locale(
    code: str,
    config: LocaleConfig | Mapping[str, Any],
    *,
    context: DateContext | None = None,
) -> bool:
    return resolve_context(context).registry.register(code, config)


def register_custom_locale(
    code: str,
    config: LocaleConfig | Mapping[str, Any],
    *,
    context: DateContext | None = None,
) -> bool:
    return resolve_context(context).registry.register_custom(code, config)


def remove_custom_locale(code: str, *, context: DateContext | None = None) -> bool:
    return resolve_context(context).registry.remove(code)


def get_locale_config(code: str, *, context: DateContext | None = None) -> LocaleConfig | None:
    return resolve_context(context).registry.get_locale_config(code)


def get_locale(code: str | None = None, *, context: DateContext | None = None) -> LocaleConfig:
    """Resolve a locale config, falling back to the current locale then English."""
    return resolve_context(context).registry.resolve(code)


def get_custom_locales(*, context: DateContext | None = None) -> list[str]:
    return resolve_context(context).registry.get_custom_locales()


def get_builtin_locales(*, context: DateContext | None = None) -> list[str]:
    return resolve_context(context).registry.get_builtin_locales()


def reset_to_defaults(*, context: DateContext | None = None) -> None:
    resolve_context(context).registry.reset()


def get_locale_info(code: str, *, context: DateContext | None = None) -> LocaleDetails | None:
    return resolve_context(context).registry.get_locale_info(code)


# =============================================================================
# Error Handling Shortcuts
# =============================================================================


def configure_error_handling(*, context: DateContext | None = None, **options: Any) -> ErrorHandlingConfig:
    """Update the error-handling configuration.

    Accepts ``log_errors``, ``fallback_date``, ``fallback_string``,
    ``fallback_number`` and ``messages`` (merged over the defaults).
    """
    ctx = resolve_context(context)
    ctx.error_config.configure(**options)
    return ctx.error_config.copy()


def get_error_config(*, context: DateContext | None = None) -> ErrorHandlingConfig:
    """Return a copy of the error-handling configuration."""
    return resolve_context(context).error_config.copy()


# =============================================================================
# App Initialization
# =============================================================================


@dataclass(frozen=True)
class InitializationStatus:
    """Snapshot of the context after initialization."""
    is_initialized: bool
    locale: str
    error_config: ErrorHandlingConfig

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_initialized": self.is_initialized,
            "locale": self.locale,
            "error_config": self.error_config.to_dict(),
        }


def initialize_app(
    locale: str = DEFAULT_LOCALE,
    *,
    log_errors: bool = True,
    fallback_date: datetime | None = None,
    fallback_string: str = "Invalid Date",
    fallback_number: float = 0,
    messages: Mapping[ErrorKind | str, str] | None = None,
    strict_mode: bool = False,
    validate_dates: bool = True,
    context: DateContext | None = None,
) -> InitializationStatus:
    """Configure locale and error handling in one call.

    An unknown ``locale`` falls back to English. ``fallback_date`` defaults
    to the context clock's current time.
    """
    ctx = resolve_context(context)
    ctx.registry.init_locale(locale)
    ctx.error_config.configure(
        log_errors=log_errors,
        fallback_date=fallback_date or ctx.now(),
        fallback_string=fallback_string,
        fallback_number=fallback_number,
        messages=messages or {},
    )
    ctx.initialized = True

    logger.info("Date-Core App Initialized")
    logger.info("Locale: %s", ctx.registry.current)
    logger.info("   Error Logging: %s", "Enabled" if log_errors else "Disabled")
    logger.info("   Strict Mode: %s", "Enabled" if strict_mode else "Disabled")
    logger.info("   Date Validation: %s", "Enabled" if validate_dates else "Disabled")

    return get_initialization_status(context=ctx)


def get_app_initialization_status(*, context: DateContext | None = None) -> bool:
    return resolve_context(context).initialized


def get_initialization_status(*, context: DateContext | None = None) -> InitializationStatus:
    ctx = resolve_context(context)
    return InitializationStatus(
        is_initialized=ctx.initialized,
        locale=ctx.registry.current,
        error_config=ctx.error_config.copy(),
    )
