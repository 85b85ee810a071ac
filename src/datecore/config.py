"""Runtime configuration for datecore.

Two pieces of configuration live here:

- Environment: the deployment environment, read from ``DATECORE_ENV``,
  ``ENVIRONMENT`` or ``ENV``. Logging is quieter in production.
- ErrorHandlingConfig: what invalid date input degrades to and whether the
  rejection is logged.

Example:
    >>> config = ErrorHandlingConfig()
    >>> config.configure(log_errors=False, messages={"null": "No date"})
    >>> config.message_for(ErrorKind.NULL)
    'No date'
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from enum import Enum
from typing import Any

from datecore.protocols import ErrorKind


# =============================================================================
# Environment
# =============================================================================


ENVIRONMENT_VARIABLES = ("DATECORE_ENV", "ENVIRONMENT", "ENV")


class Environment(Enum):
    """Deployment environment; production-like environments quiet logging."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """Parse a name or short alias (``dev``, ``test``, ``stage``, ``prod``).

        Unrecognized names are treated as development.
        """
        name = value.strip().lower()
        for env in cls:
            if name == env.value or (len(name) >= 3 and env.value.startswith(name)):
                return env
        return cls.DEVELOPMENT

    @classmethod
    def current(cls) -> "Environment":
        """First non-empty variable of ``ENVIRONMENT_VARIABLES`` wins."""
        value = next(filter(None, map(os.getenv, ENVIRONMENT_VARIABLES)), None)
        return cls.from_string(value) if value else cls.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Staging runs with production logging."""
        return self in (Environment.PRODUCTION, Environment.STAGING)


# =============================================================================
# Error Handling
# =============================================================================


DEFAULT_ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NULL: "Date cannot be null or undefined",
    ErrorKind.EMPTY: "Date cannot be empty string",
    ErrorKind.GENERIC: "Invalid date provided",
    ErrorKind.NAN: "Date results in NaN",
    ErrorKind.OUT_OF_RANGE: "Date is out of valid range",
}


def _normalize_messages(messages: Mapping[ErrorKind | str, str]) -> dict[ErrorKind, str]:
    normalized: dict[ErrorKind, str] = {}
    for key, text in messages.items():
        try:
            kind = ErrorKind(key)
        except ValueError:
            raise ValueError(
                f"Unknown error kind {key!r}; expected one of "
                f"{', '.join(k.value for k in ErrorKind)}"
            ) from None
        normalized[kind] = str(text)
    return normalized


@dataclass
class ErrorHandlingConfig:
    """How invalid date input is reported and replaced.

    Attributes:
        log_errors: Emit a log record for every rejected input
        fallback_date: Date substituted for invalid input
        fallback_string: Placeholder text for callers that need one
        fallback_number: Placeholder number for callers that need one
        messages: Human-readable message per ErrorKind
    """

    log_errors: bool = True
    fallback_date: datetime = field(default_factory=datetime.now)
    fallback_string: str = "Invalid Date"
    fallback_number: float = 0
    messages: dict[ErrorKind, str] = field(
        default_factory=lambda: dict(DEFAULT_ERROR_MESSAGES)
    )

    def configure(self, **options: Any) -> "ErrorHandlingConfig":
        """Update fields in place.

        ``messages`` is merged over the current messages rather than
        replacing them.

        Raises:
            TypeError: On an unknown option name
            ValueError: On an unknown message key
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise TypeError(f"Unknown error handling option(s): {', '.join(unknown)}")

        for name, value in options.items():
            if name == "messages":
                if value:
                    self.messages.update(_normalize_messages(value))
            elif name == "fallback_date" and value is None:
                continue
            else:
                setattr(self, name, value)
        return self

    def message_for(self, kind: ErrorKind) -> str:
        return self.messages.get(kind, DEFAULT_ERROR_MESSAGES[kind])

    def copy(self) -> "ErrorHandlingConfig":
        """Independent copy (the messages dict is not shared)."""
        return replace(self, messages=dict(self.messages))

    def to_dict(self) -> dict[str, Any]:
        return {
            "log_errors": self.log_errors,
            "fallback_date": self.fallback_date.isoformat(),
            "fallback_string": self.fallback_string,
            "fallback_number": self.fallback_number,
            "messages": {kind.value: text for kind, text in self.messages.items()},
        }
