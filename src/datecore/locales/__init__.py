"""Bundled locale tables and locale metadata.

``en`` and ``ar`` are registered in every new LocaleRegistry. ``fr``, ``es``
and ``de`` ship here for callers to register:

    from datecore import register_locale
    from datecore.locales import fr

    register_locale("fr", fr)
"""

from __future__ import annotations

from dataclasses import dataclass

from datecore.locales.ar import ar
from datecore.locales.de import de
from datecore.locales.en import en
from datecore.locales.es import es
from datecore.locales.fr import fr
from datecore.protocols import LocaleConfig, TextDirection

__all__ = [
    "en",
    "ar",
    "fr",
    "es",
    "de",
    "LOCALE_CONFIG",
    "AVAILABLE_LOCALES",
    "BUILTIN_LOCALES",
    "DEFAULT_LOCALE",
    "LOCALE_INFO",
    "LocaleMetadata",
    "RTL_LANGUAGES",
    "is_rtl_language",
    "get_locale_metadata",
    "has_custom_numerals",
    "get_locale_direction",
    "get_all_locale_names",
    "get_rtl_locales",
    "get_ltr_locales",
]

DEFAULT_LOCALE = "en"

LOCALE_CONFIG: dict[str, LocaleConfig] = {"en": en, "ar": ar, "fr": fr, "es": es, "de": de}

AVAILABLE_LOCALES: tuple[str, ...] = tuple(LOCALE_CONFIG)

# Registered at startup by every LocaleRegistry
BUILTIN_LOCALES: dict[str, LocaleConfig] = {"en": en, "ar": ar}


RTL_LANGUAGES = frozenset([
    "ar",  # Arabic
    "arc", # Aramaic
    "ckb", # Central Kurdish
    "dv",  # Divehi/Maldivian
    "fa",  # Persian/Farsi
    "he",  # Hebrew
    "ks",  # Kashmiri
    "ps",  # Pashto
    "sd",  # Sindhi
    "ug",  # Uyghur
    "ur",  # Urdu
    "yi",  # Yiddish
])


def is_rtl_language(language: str) -> bool:
    """Check if a language code represents an RTL language.

    Args:
        language: ISO 639 language code, optionally with a region
            (``ar``, ``ar-SA``, ``fa_IR``)

    Returns:
        True if RTL language
    """
    lang = language.lower().replace("-", "_")
    if lang in RTL_LANGUAGES:
        return True
    return lang.split("_")[0] in RTL_LANGUAGES


@dataclass(frozen=True)
class LocaleMetadata:
    """Display metadata for a bundled locale."""
    name: str
    native_name: str
    direction: TextDirection
    has_custom_numerals: bool
    sample_month: str
    sample_day: str


LOCALE_INFO: dict[str, LocaleMetadata] = {
    code: LocaleMetadata(
        name=name,
        native_name=native,
        direction=TextDirection.RTL if is_rtl_language(code) else TextDirection.LTR,
        has_custom_numerals=LOCALE_CONFIG[code].has_custom_numerals,
        sample_month=LOCALE_CONFIG[code].months[0],
        sample_day=LOCALE_CONFIG[code].weekdays[0],
    )
    for code, name, native in (
        ("en", "English", "English"),
        ("ar", "Arabic", "العربية"),
        ("fr", "French", "Français"),
        ("es", "Spanish", "Español"),
        ("de", "German", "Deutsch"),
    )
}


def get_locale_metadata(code: str) -> LocaleMetadata | None:
    return LOCALE_INFO.get(code)


def has_custom_numerals(code: str) -> bool:
    info = LOCALE_INFO.get(code)
    return info.has_custom_numerals if info else False


def get_locale_direction(code: str) -> TextDirection:
    """Direction of a locale; unknown codes are classified by language."""
    info = LOCALE_INFO.get(code)
    if info is not None:
        return info.direction
    return TextDirection.RTL if is_rtl_language(code) else TextDirection.LTR


def get_all_locale_names() -> list[dict[str, str]]:
    return [
        {"code": code, "name": info.name, "native_name": info.native_name}
        for code, info in LOCALE_INFO.items()
    ]


def get_rtl_locales() -> list[str]:
    return [code for code, info in LOCALE_INFO.items() if info.direction == TextDirection.RTL]


def get_ltr_locales() -> list[str]:
    return [code for code, info in LOCALE_INFO.items() if info.direction == TextDirection.LTR]
