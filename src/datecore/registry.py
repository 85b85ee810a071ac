"""Locale registry.

Holds the named locale configurations (built-in and custom), the current
locale and the startup snapshot used by ``reset``. Built-in and custom codes
are listed separately but resolve through one lookup table in which the
most recent registration of a code wins.

Example:
    >>> from datecore.locales import fr
    >>> registry = LocaleRegistry()
    >>> registry.register_custom("fr", fr)
    True
    >>> registry.set_current("fr")
    True
    >>> registry.resolve(None).months[0]
    'janvier'
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Any

from datecore.locales import BUILTIN_LOCALES, DEFAULT_LOCALE, get_locale_direction
from datecore.logging import get_logger
from datecore.protocols import LocaleConfig, LocaleDetails, coerce_locale_config

logger = get_logger("locale")


def language_of(code: str | None) -> str:
    """Base language of a locale code (``ar-SA`` -> ``ar``)."""
    if not code:
        return ""
    return code.lower().replace("-", "_").split("_")[0]


class LocaleRegistry:
    """Thread-safe registry of locale configurations.

    Mutations take an internal lock; reads go through plain dict lookups.
    """

    def __init__(
        self,
        builtins: Mapping[str, LocaleConfig] | None = None,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        """Initialize the registry.

        Args:
            builtins: Locales registered at startup (default: en, ar)
            default_locale: Locale used initially and as the resolution
                fallback; must be one of ``builtins``

        Raises:
            ValueError: If the default locale is missing or a built-in
                config is invalid
        """
        startup = dict(BUILTIN_LOCALES if builtins is None else builtins)
        if default_locale not in startup:
            raise ValueError(f"Default locale '{default_locale}' must be a built-in locale")
        for code, config in startup.items():
            coerced = coerce_locale_config(config)
            if coerced is None:
                raise ValueError(f"Invalid built-in locale config for '{code}'")
            startup[code] = coerced

        self._default = default_locale
        self._startup: dict[str, LocaleConfig] = startup
        self._lock = threading.RLock()
        self._current = default_locale
        self._builtin: dict[str, LocaleConfig] = {}
        self._custom: dict[str, LocaleConfig] = {}
        self._configs: dict[str, LocaleConfig] = {}
        self._load_startup()

    def _load_startup(self) -> None:
        self._builtin = dict(self._startup)
        self._custom = {}
        self._configs = dict(self._startup)

    # ------------------------------------------------------------------
    # Current locale
    # ------------------------------------------------------------------

    @property
    def default(self) -> str:
        return self._default

    @property
    def current(self) -> str:
        return self._current

    def get_current_locale(self) -> str:
        return self._current

    def set_current(self, code: str) -> bool:
        """Set the current locale.

        Returns:
            False (current locale unchanged) if ``code`` is not registered
        """
        if self.is_valid_locale(code):
            with self._lock:
                self._current = code
            return True
        logger.warning("Invalid locale: %s. Current locale unchanged.", code)
        return False

    def init_locale(self, code: str = DEFAULT_LOCALE) -> bool:
        """Set the current locale, falling back to the default on failure."""
        if self.is_valid_locale(code):
            with self._lock:
                self._current = code
            return True
        logger.warning("Invalid locale: %s. Using default: %s", code, self._default)
        with self._lock:
            self._current = self._default
        return False

    def is_arabic(self) -> bool:
        return language_of(self._current) == "ar"

    def is_english(self) -> bool:
        return language_of(self._current) == "en"

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def _checked(self, code: Any, config: Any, kind: str) -> LocaleConfig | None:
        if not code or not isinstance(code, str):
            logger.error("Invalid locale code. Must be a non-empty string.")
            return None
        coerced = coerce_locale_config(config)
        if coerced is None:
            logger.error("Invalid %slocale config for %s. Missing required properties.", kind, code)
        return coerced

    def register(self, code: str, config: LocaleConfig | Mapping[str, Any]) -> bool:
        """Register a locale in the built-in namespace.

        Returns:
            False if the code is not a non-empty string or the config
            fails shape validation
        """
        checked = self._checked(code, config, "")
        if checked is None:
            return False
        with self._lock:
            self._builtin[code] = checked
            self._configs[code] = checked
        logger.info("Locale '%s' registered successfully", code)
        return True

    def register_custom(self, code: str, config: LocaleConfig | Mapping[str, Any]) -> bool:
        """Register a locale in the custom namespace."""
        checked = self._checked(code, config, "custom ")
        if checked is None:
            return False
        with self._lock:
            self._custom[code] = checked
            self._configs[code] = checked
        logger.info("Custom locale '%s' registered successfully", code)
        return True

    def remove(self, code: str) -> bool:
        """Remove a custom locale.

        Built-in codes are never removed. When a custom locale shadowed a
        built-in one, the built-in configuration becomes active again.
        """
        with self._lock:
            if code not in self._custom:
                logger.warning("Custom locale '%s' not found", code)
                return False
            del self._custom[code]
            if code in self._builtin:
                self._configs[code] = self._builtin[code]
            else:
                self._configs.pop(code, None)
                if self._current == code:
                    self._current = self._default
        logger.info("Custom locale '%s' removed successfully", code)
        return True

    def reset(self) -> None:
        """Drop custom locales and restore the startup built-in set."""
        with self._lock:
            self._current = self._default
            self._load_startup()
        logger.info("Locale registry reset to defaults")

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def is_valid_locale(self, code: Any) -> bool:
        return isinstance(code, str) and code in self._configs

    def get_locale_config(self, code: str) -> LocaleConfig | None:
        return self._configs.get(code)

    def resolve(self, code: str | None = None) -> LocaleConfig:
        """Return the config for ``code`` (or the current locale).

        Unknown codes log a warning and resolve to the default locale.
        """
        code = code or self._current
        config = self._configs.get(code)
        if config is None:
            logger.warning("Locale '%s' not found. Falling back to English.", code)
            config = self._configs.get(self._default) or self._startup[self._default]
        return config

    def get_available_locales(self) -> list[str]:
        return list(dict.fromkeys([*self._builtin, *self._custom]))

    def get_builtin_locales(self) -> list[str]:
        return list(self._builtin)

    def get_custom_locales(self) -> list[str]:
        return list(self._custom)

    def get_locale_info(self, code: str) -> LocaleDetails | None:
        config = self.get_locale_config(code)
        if config is None:
            return None
        return LocaleDetails(
            code=code,
            is_builtin=code in self._builtin,
            is_custom=code in self._custom,
            has_custom_numerals=config.has_custom_numerals,
            direction=get_locale_direction(code),
        )

    def __contains__(self, code: object) -> bool:
        return self.is_valid_locale(code)

    def __len__(self) -> int:
        return len(self._configs)
