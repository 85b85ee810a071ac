"""datecore - Locale-Aware Date Formatting with Safe Fallbacks."""

from datecore.protocols import (
    ErrorKind,
    LocaleConfig,
    LocaleConfigError,
    LocaleDetails,
    TextDirection,
    ValidationResult,
    is_valid_locale_config,
)
from datecore.config import DEFAULT_ERROR_MESSAGES, Environment, ErrorHandlingConfig
from datecore.logging import (
    LogLevel,
    LoggerConfig,
    configure_logger,
    get_logger,
    get_logger_config,
    reset_logger,
)
from datecore.registry import LocaleRegistry

# Context and locale management
from datecore.context import (
    DateContext,
    InitializationStatus,
    configure_error_handling,
    get_app_initialization_status,
    get_available_locales,
    get_builtin_locales,
    get_current_locale,
    get_custom_locales,
    get_default_context,
    get_error_config,
    get_initialization_status,
    get_locale,
    get_locale_config,
    get_locale_info,
    init_locale,
    initialize_app,
    is_arabic,
    is_english,
    is_valid_locale,
    locale_context,
    register_custom_locale,
    register_locale,
    remove_custom_locale,
    reset_default_context,
    reset_to_defaults,
    set_default_context,
    set_locale,
)

# Validation
from datecore.validation import (
    create_safe_date,
    get_date_validation_info,
    is_valid_date,
    parse_date,
    validate_date,
)

# Numerals
from datecore.numerals import convert_numerals, to_latin_digits, to_local_digits

# Arithmetic
from datecore.arithmetic import (
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

# Formatting
from datecore.formatting import (
    format_calendar,
    format_date,
    format_date_ddmmyyyy,
    format_date_localized,
    format_date_mmddyyyy,
    format_date_smart,
    format_date_time,
    format_date_time_localized,
    format_long_date,
    format_time,
    format_time_localized,
    get_day_name,
    get_month_name,
    get_relative_time,
    get_relative_time_enhanced,
    get_relative_time_localized,
)

# Polars helpers
from datecore.frames import format_series, parse_series, validate_series

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("datecore")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    # Types
    "ErrorKind",
    "LocaleConfig",
    "LocaleConfigError",
    "LocaleDetails",
    "TextDirection",
    "ValidationResult",
    "is_valid_locale_config",
    # Configuration
    "DEFAULT_ERROR_MESSAGES",
    "Environment",
    "ErrorHandlingConfig",
    "LogLevel",
    "LoggerConfig",
    "configure_logger",
    "get_logger",
    "get_logger_config",
    "reset_logger",
    # Context & locales
    "LocaleRegistry",
    "DateContext",
    "InitializationStatus",
    "configure_error_handling",
    "get_app_initialization_status",
    "get_available_locales",
    "get_builtin_locales",
    "get_current_locale",
    "get_custom_locales",
    "get_default_context",
    "get_error_config",
    "get_initialization_status",
    "get_locale",
    "get_locale_config",
    "get_locale_info",
    "init_locale",
    "initialize_app",
    "is_arabic",
    "is_english",
    "is_valid_locale",
    "locale_context",
    "register_custom_locale",
    "register_locale",
    "remove_custom_locale",
    "reset_default_context",
    "reset_to_defaults",
    "set_default_context",
    "set_locale",
    # Validation
    "create_safe_date",
    "get_date_validation_info",
    "is_valid_date",
    "parse_date",
    "validate_date",
    # Numerals
    "convert_numerals",
    "to_latin_digits",
    "to_local_digits",
    # Arithmetic
    "add_days",
    "add_months",
    "difference_in_days",
    "difference_in_hours",
    "difference_in_minutes",
    "end_of_day",
    "end_of_month",
    "end_of_week",
    "is_this_month",
    "is_this_week",
    "is_this_year",
    "is_today",
    "is_tomorrow",
    "is_yesterday",
    "now",
    "start_of_day",
    "start_of_month",
    "start_of_week",
    "subtract_days",
    "subtract_months",
    "unix",
    # Formatting
    "format_calendar",
    "format_date",
    "format_date_ddmmyyyy",
    "format_date_localized",
    "format_date_mmddyyyy",
    "format_date_smart",
    "format_date_time",
    "format_date_time_localized",
    "format_long_date",
    "format_time",
    "format_time_localized",
    "get_day_name",
    "get_month_name",
    "get_relative_time",
    "get_relative_time_enhanced",
    "get_relative_time_localized",
    # Polars helpers
    "format_series",
    "parse_series",
    "validate_series",
]
