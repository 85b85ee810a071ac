"""Tests for bundled locale data and LocaleConfig."""

import pytest

from datecore import LocaleConfig, LocaleConfigError, TextDirection, is_valid_locale_config
from datecore.locales import (
    AVAILABLE_LOCALES,
    BUILTIN_LOCALES,
    LOCALE_CONFIG,
    ar,
    en,
    get_all_locale_names,
    get_locale_direction,
    get_locale_metadata,
    get_ltr_locales,
    get_rtl_locales,
    has_custom_numerals,
    is_rtl_language,
)


class TestBundledLocales:
    """Tests for the shipped locale tables."""

    @pytest.mark.parametrize("code", sorted(LOCALE_CONFIG))
    def test_every_locale_is_valid(self, code):
        """All bundled tables satisfy the shape contract."""
        config = LOCALE_CONFIG[code]
        assert config.validate() == []
        assert len(config.months) == 12
        assert len(config.weekdays_min) == 7

    @pytest.mark.parametrize("code", sorted(LOCALE_CONFIG))
    def test_every_locale_has_phrases(self, code):
        """Relative and calendar phrases cover every key used in formatting."""
        config = LOCALE_CONFIG[code]
        for key in ("s", "ss", "m", "mm", "h", "hh", "d", "dd", "w", "ww", "M", "MM", "y", "yy",
                    "just_now", "today", "yesterday", "tomorrow", "ago"):
            assert key in config.relative_time
        for key in ("same_day", "next_day", "next_week", "last_day", "last_week", "same_else"):
            assert key in config.calendar

    def test_available_and_builtin(self):
        assert AVAILABLE_LOCALES == ("en", "ar", "fr", "es", "de")
        assert set(BUILTIN_LOCALES) == {"en", "ar"}

    def test_arabic_maps_are_inverse(self):
        """The Arabic symbol map is the inverse of its number map."""
        assert {v: k for k, v in ar.number_map.items()} == dict(ar.symbol_map)
        assert ar.comma == "،"
        assert en.comma == ","


class TestLocaleMetadata:
    """Tests for locale metadata helpers."""

    def test_metadata(self):
        meta = get_locale_metadata("ar")
        assert meta.name == "Arabic"
        assert meta.direction == TextDirection.RTL
        assert meta.has_custom_numerals is True
        assert meta.sample_month == ar.months[0]
        assert get_locale_metadata("xx") is None

    def test_numerals(self):
        assert has_custom_numerals("ar")
        assert not has_custom_numerals("fr")
        assert not has_custom_numerals("xx")

    def test_direction(self):
        assert get_locale_direction("ar") == TextDirection.RTL
        assert get_locale_direction("de") == TextDirection.LTR
        assert get_locale_direction("he-IL") == TextDirection.RTL
        assert get_rtl_locales() == ["ar"]
        assert get_ltr_locales() == ["en", "fr", "es", "de"]

    def test_all_names(self):
        names = get_all_locale_names()
        assert {"code": "fr", "name": "French", "native_name": "Français"} in names
        assert len(names) == 5

    @pytest.mark.parametrize("code", ["ar", "ar-SA", "fa_IR", "HE", "ur"])
    def test_rtl_languages(self, code):
        assert is_rtl_language(code)

    @pytest.mark.parametrize("code", ["en", "fr-CA", "de", "zh"])
    def test_ltr_languages(self, code):
        assert not is_rtl_language(code)


class TestLocaleConfig:
    """Tests for LocaleConfig construction and validation."""

    def test_frozen(self):
        with pytest.raises(AttributeError):
            en.months = ()

    def test_mappings_are_read_only(self):
        with pytest.raises(TypeError):
            en.relative_time["today"] = "Now"

    def test_symbol_map_derived(self):
        """symbol_map is derived from number_map when omitted."""
        data = en.to_dict()
        data["number_map"] = {"٣": "3"}
        data.pop("symbol_map")
        config = LocaleConfig.from_dict(data)
        assert config.symbol_map == {"3": "٣"}
        assert config.has_custom_numerals

    def test_from_dict_missing_keys(self):
        with pytest.raises(LocaleConfigError, match="relative_time"):
            LocaleConfig.from_dict({k: v for k, v in en.to_dict().items() if k != "relative_time"})

    def test_to_dict_round_trip(self):
        assert LocaleConfig.from_dict(en.to_dict()) == en

    def test_validate_reports_problems(self):
        config = LocaleConfig(
            months=("Jan",),
            months_short=en.months_short,
            weekdays=en.weekdays,
            weekdays_short=en.weekdays_short,
            weekdays_min=en.weekdays_min,
            relative_time={},
            calendar=en.calendar,
        )
        problems = config.validate()
        assert any("months must have 12" in p for p in problems)
        assert any("relative_time" in p for p in problems)
        assert not is_valid_locale_config(config)

    def test_is_valid_locale_config(self):
        assert is_valid_locale_config(en)
        assert is_valid_locale_config(en.to_dict())
        assert not is_valid_locale_config(None)
