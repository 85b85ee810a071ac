"""Digit localization.

Rewrites the digits of an already formatted string between ASCII and a
locale's native glyphs. Both directions pass every other character through
unchanged and are no-ops for locales without a digit table.

Example:
    >>> from datecore.locales import ar
    >>> to_local_digits("14:30", ar)
    '١٤:٣٠'
    >>> to_latin_digits("١٤:٣٠", ar)
    '14:30'
"""

from __future__ import annotations

import re

from datecore.protocols import LocaleConfig

# Python's \d also matches non-ASCII digits
_ASCII_DIGIT_RE = re.compile(r"[0-9]")


def to_local_digits(text: str, locale_config: LocaleConfig | None) -> str:
    """Replace ASCII digits using the locale's symbol map."""
    if not text or locale_config is None or not locale_config.symbol_map:
        return text
    symbol_map = locale_config.symbol_map
    return _ASCII_DIGIT_RE.sub(lambda match: symbol_map.get(match.group(), match.group()), text)


def to_latin_digits(text: str, locale_config: LocaleConfig | None) -> str:
    """Replace localized digits with ASCII digits using the number map."""
    if not text or locale_config is None or not locale_config.number_map:
        return text
    number_map = locale_config.number_map
    return "".join(number_map.get(char, char) for char in text)


def convert_numerals(
    text: str,
    to_local: bool = False,
    locale_config: LocaleConfig | None = None,
) -> str:
    """Convert digits in either direction.

    Args:
        text: String to convert
        to_local: True for ASCII -> localized, False for localized -> ASCII
        locale_config: Locale supplying the digit tables
    """
    if to_local:
        return to_local_digits(text, locale_config)
    return to_latin_digits(text, locale_config)


def localize_digits(text: str, locale_config: LocaleConfig) -> str:
    """Apply digit localization only when the locale defines a number map."""
    if locale_config.number_map:
        return to_local_digits(text, locale_config)
    return text
