"""Component-gated logging for datecore.

Every subsystem logs through a ComponentLogger that first applies the
datecore gating rules (global switch, environment, global level, component
level) and then hands the record to the standard ``logging`` module. Hosts
can therefore intercept or silence output with ordinary logging
configuration on the ``datecore`` logger hierarchy:

    datecore              [Date-Core]
    datecore.error        [Date-Core:Error]       invalid date input
    datecore.locale       [Date-Core:Locale]      locale registry
    datecore.init         [Date-Core:Init]        app initialization
    datecore.validation   [Date-Core:Validation]  validation internals

Example:
    >>> from datecore.logging import configure_logger, get_logger
    >>> configure_logger(level="info")
    >>> get_logger("locale").info("Locale '%s' registered", "fr")
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, fields, replace
from enum import IntEnum
from typing import Any

from datecore.config import Environment


# =============================================================================
# Log Levels
# =============================================================================


class LogLevel(IntEnum):
    """Log severity levels (aligned with the standard library values)."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    NONE = 100

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Convert string to LogLevel."""
        mapping = {
            "debug": cls.DEBUG,
            "info": cls.INFO,
            "warning": cls.WARNING,
            "warn": cls.WARNING,
            "error": cls.ERROR,
            "none": cls.NONE,
            "off": cls.NONE,
        }
        return mapping.get(level.lower(), cls.WARNING)

    @classmethod
    def coerce(cls, level: "LogLevel | str | int") -> "LogLevel":
        if isinstance(level, str):
            return cls.from_string(level)
        return cls(level)


COMPONENT_TAGS: dict[str, str] = {
    "error": "Error",
    "locale": "Locale",
    "init": "Init",
    "validation": "Validation",
}


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class LoggerConfig:
    """Gating rules applied before a record reaches ``logging``.

    Attributes:
        enabled: Master switch outside production
        level: Global minimum level outside production
        production_enabled: Master switch in production
        production_level: Global minimum level in production
        components: Per-component minimum level
        environment: Fixed environment; detected from env vars when None
    """

    enabled: bool = True
    level: LogLevel = LogLevel.WARNING
    production_enabled: bool = False
    production_level: LogLevel = LogLevel.ERROR
    components: dict[str, LogLevel] = field(default_factory=lambda: {
        "error": LogLevel.ERROR,
        "locale": LogLevel.WARNING,
        "init": LogLevel.INFO,
        "validation": LogLevel.ERROR,
    })
    environment: Environment | None = None

    def resolve_environment(self) -> Environment:
        return self.environment or Environment.current()

    def is_enabled(self) -> bool:
        if self.resolve_environment().is_production:
            return self.production_enabled
        return self.enabled

    def current_level(self) -> LogLevel:
        if self.resolve_environment().is_production:
            return self.production_level
        return self.level

    def should_log(self, level: LogLevel, component: str | None = None) -> bool:
        """Check whether a record at ``level`` passes every gate."""
        if not self.is_enabled():
            return False
        if level < self.current_level():
            return False
        component_level = self.components.get(component) if component else None
        if component_level is not None and level < component_level:
            return False
        return True


_config = LoggerConfig()
_loggers: dict[str | None, "ComponentLogger"] = {}
_lock = threading.Lock()


def configure_logger(**options: Any) -> LoggerConfig:
    """Update the global logger configuration.

    Levels may be given as LogLevel, int or name. ``components`` is merged
    over the existing component levels.

    Raises:
        TypeError: On an unknown option name
    """
    known = {f.name for f in fields(LoggerConfig)}
    unknown = sorted(set(options) - known)
    if unknown:
        raise TypeError(f"Unknown logger option(s): {', '.join(unknown)}")

    with _lock:
        for name, value in options.items():
            if name in ("level", "production_level"):
                value = LogLevel.coerce(value)
            elif name == "components":
                merged = dict(_config.components)
                merged.update({key: LogLevel.coerce(lvl) for key, lvl in value.items()})
                value = merged
            elif name == "environment" and isinstance(value, str):
                value = Environment.from_string(value)
            setattr(_config, name, value)
    return get_logger_config()


def get_logger_config() -> LoggerConfig:
    """Return a copy of the global logger configuration."""
    return replace(_config, components=dict(_config.components))


def reset_logger() -> None:
    """Restore the default logger configuration."""
    global _config
    with _lock:
        _config = LoggerConfig()


def is_production() -> bool:
    return _config.resolve_environment().is_production


# =============================================================================
# Component Logger
# =============================================================================


class ComponentLogger:
    """Logger for one datecore component.

    Messages use ``%``-style lazy arguments like the standard library, so
    extra arguments are only rendered when a handler accepts the record.
    """

    def __init__(self, component: str | None = None) -> None:
        self._component = component
        name = f"datecore.{component}" if component else "datecore"
        tag = COMPONENT_TAGS.get(component or "", component.title() if component else "")
        self._prefix = f"[Date-Core:{tag}]" if component else "[Date-Core]"
        self._logger = logging.getLogger(name)

    @property
    def component(self) -> str | None:
        return self._component

    @property
    def name(self) -> str:
        return self._logger.name

    def is_enabled_for(self, level: LogLevel) -> bool:
        return _config.should_log(level, self._component)

    def _log(self, level: LogLevel, message: str, *args: Any) -> None:
        if not self.is_enabled_for(level):
            return
        self._logger.log(int(level), f"{self._prefix} {message}", *args)

    def debug(self, message: str, *args: Any) -> None:
        self._log(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        self._log(LogLevel.INFO, message, *args)

    def warning(self, message: str, *args: Any) -> None:
        self._log(LogLevel.WARNING, message, *args)

    def warn(self, message: str, *args: Any) -> None:
        """Alias for warning."""
        self.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self._log(LogLevel.ERROR, message, *args)


def get_logger(component: str | None = None) -> ComponentLogger:
    """Get or create the logger for a component.

    Args:
        component: One of ``error``, ``locale``, ``init``, ``validation``,
            or None for the package logger.
    """
    with _lock:
        if component not in _loggers:
            _loggers[component] = ComponentLogger(component)
        return _loggers[component]
