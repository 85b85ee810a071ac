"""Tests for the locale registry and its module-level shortcuts."""

import logging

import pytest

from datecore import (
    LocaleConfig,
    LocaleRegistry,
    TextDirection,
    get_available_locales,
    get_builtin_locales,
    get_current_locale,
    get_custom_locales,
    get_locale,
    get_locale_config,
    get_locale_info,
    init_locale,
    is_arabic,
    is_english,
    is_valid_locale,
    locale_context,
    register_custom_locale,
    register_locale,
    remove_custom_locale,
    reset_to_defaults,
    set_locale,
)
from datecore.locales import ar, de, en, fr


@pytest.fixture
def registry():
    return LocaleRegistry()


# =============================================================================
# Startup State
# =============================================================================


class TestStartup:
    """Tests for a freshly built registry."""

    def test_builtin_locales(self, registry):
        """Only English and Arabic are built in."""
        assert registry.get_builtin_locales() == ["en", "ar"]
        assert registry.get_custom_locales() == []
        assert registry.get_available_locales() == ["en", "ar"]

    def test_default_locale_is_current(self, registry):
        """The current locale starts as English."""
        assert registry.current == "en"
        assert registry.is_english()
        assert not registry.is_arabic()

    def test_missing_default_rejected(self):
        """The default locale must be one of the built-ins."""
        with pytest.raises(ValueError):
            LocaleRegistry(builtins={"ar": ar}, default_locale="en")

    def test_invalid_builtin_rejected(self):
        """Built-in configs must satisfy the shape contract."""
        with pytest.raises(ValueError):
            LocaleRegistry(builtins={"en": {"months": ["January"]}})


# =============================================================================
# Current Locale
# =============================================================================


class TestCurrentLocale:
    """Tests for switching the current locale."""

    def test_set_current(self, registry):
        """A registered code becomes current."""
        assert registry.set_current("ar") is True
        assert registry.current == "ar"
        assert registry.is_arabic()

    def test_set_unknown_leaves_current(self, registry, caplog):
        """An unknown code is rejected with a warning."""
        registry.set_current("ar")
        with caplog.at_level(logging.WARNING, logger="datecore"):
            assert registry.set_current("xx") is False
        assert registry.current == "ar"
        assert any("Invalid locale: xx" in r.getMessage() for r in caplog.records)

    def test_init_locale_falls_back(self, registry):
        """init_locale resets to the default on failure."""
        registry.set_current("ar")
        assert registry.init_locale("xx") is False
        assert registry.current == "en"

    def test_regional_arabic(self, registry):
        """Regional variants count as Arabic."""
        registry.register_custom("ar-SA", ar)
        registry.set_current("ar-SA")
        assert registry.is_arabic()


# =============================================================================
# Registration
# =============================================================================


class TestRegistration:
    """Tests for register, register_custom and remove."""

    def test_register_builtin_namespace(self, registry):
        """register adds to the built-in namespace."""
        assert registry.register("fr", fr) is True
        assert "fr" in registry.get_builtin_locales()
        assert registry.get_locale_config("fr") is fr

    def test_register_custom_namespace(self, registry):
        """register_custom adds to the custom namespace."""
        assert registry.register_custom("de", de) is True
        assert registry.get_custom_locales() == ["de"]
        assert registry.get_available_locales() == ["en", "ar", "de"]

    def test_register_from_camel_case_mapping(self, registry):
        """camelCase mappings are converted."""
        data = {
            "months": list(en.months),
            "monthsShort": list(en.months_short),
            "weekdays": list(en.weekdays),
            "weekdaysShort": list(en.weekdays_short),
            "weekdaysMin": list(en.weekdays_min),
            "relativeTime": {"justNow": "now!", "d": "day", "dd": "%d days"},
            "calendar": {"sameDay": "Today at LT"},
        }
        assert registry.register_custom("en-x", data) is True
        config = registry.get_locale_config("en-x")
        assert config.relative_time["just_now"] == "now!"
        assert config.calendar["same_day"] == "Today at LT"

    @pytest.mark.parametrize(
        "config",
        [
            None,
            {},
            {"months": list(en.months)},
            {**en.to_dict(), "months": ["January"]},
            {**en.to_dict(), "weekdays": list(en.weekdays)[:6]},
            {**en.to_dict(), "calendar": {}},
            "not a config",
        ],
    )
    def test_invalid_config_rejected(self, registry, config):
        """Invalid configs return False and change nothing."""
        before = registry.get_available_locales()
        assert registry.register("zz", config) is False
        assert registry.register_custom("zz", config) is False
        assert registry.get_available_locales() == before

    @pytest.mark.parametrize("code", ["", None, 42])
    def test_invalid_code_rejected(self, registry, code):
        """Codes must be non-empty strings."""
        assert registry.register_custom(code, fr) is False

    def test_last_registration_wins(self, registry):
        """A custom registration shadows a built-in code."""
        registry.register_custom("en", fr)
        assert registry.resolve("en").months[0] == "janvier"
        assert registry.get_available_locales() == ["en", "ar"]

    def test_remove_custom(self, registry):
        """Removing a custom locale drops it from resolution."""
        registry.register_custom("fr", fr)
        assert registry.remove("fr") is True
        assert not registry.is_valid_locale("fr")

    def test_remove_builtin_is_noop(self, registry):
        """Built-in codes cannot be removed."""
        assert registry.remove("ar") is False
        assert registry.is_valid_locale("ar")

    def test_remove_restores_shadowed_builtin(self, registry):
        """Removing a shadowing custom locale restores the built-in."""
        registry.register_custom("en", fr)
        registry.remove("en")
        assert registry.resolve("en").months[0] == "January"

    def test_remove_current_resets_to_default(self, registry):
        """Removing the current custom locale resets current."""
        registry.register_custom("fr", fr)
        registry.set_current("fr")
        registry.remove("fr")
        assert registry.current == "en"

    def test_reset(self, registry):
        """reset restores exactly the startup set."""
        registry.register("fr", fr)
        registry.register_custom("de", de)
        registry.set_current("de")
        registry.reset()
        assert registry.get_available_locales() == ["en", "ar"]
        assert registry.get_custom_locales() == []
        assert registry.current == "en"


# =============================================================================
# Resolution
# =============================================================================


class TestResolution:
    """Tests for resolve and get_locale_info."""

    def test_resolve_none_uses_current(self, registry):
        """A falsy code resolves the current locale."""
        registry.set_current("ar")
        assert registry.resolve(None) is ar
        assert registry.resolve("") is ar

    def test_resolve_unknown_falls_back(self, registry, caplog):
        """Unknown codes fall back to English with a warning."""
        with caplog.at_level(logging.WARNING, logger="datecore"):
            assert registry.resolve("xx") is en
        assert any("Falling back to English" in r.getMessage() for r in caplog.records)

    def test_locale_info(self, registry):
        """get_locale_info reports namespace, numerals and direction."""
        info = registry.get_locale_info("ar")
        assert info.is_builtin is True
        assert info.is_custom is False
        assert info.has_custom_numerals is True
        assert info.direction == TextDirection.RTL
        assert info.to_dict()["direction"] == "rtl"

    def test_locale_info_custom(self, registry):
        """Custom locales are flagged as custom."""
        registry.register_custom("fr", fr)
        info = registry.get_locale_info("fr")
        assert info.is_custom is True
        assert info.direction == TextDirection.LTR

    def test_locale_info_unknown(self, registry):
        assert registry.get_locale_info("xx") is None

    def test_container_protocol(self, registry):
        assert "en" in registry
        assert "xx" not in registry
        assert len(registry) == 2


# =============================================================================
# Module-Level Shortcuts
# =============================================================================


class TestShortcuts:
    """Tests for the default-context shortcut functions."""

    def test_set_and_get_locale(self):
        """set_locale switches the default context's locale."""
        assert set_locale("ar") is True
        assert get_current_locale() == "ar"
        assert is_arabic()
        assert not is_english()

    def test_register_and_remove(self):
        """Custom locales round-trip through the shortcuts."""
        assert register_custom_locale("fr", fr)
        assert is_valid_locale("fr")
        assert get_custom_locales() == ["fr"]
        assert get_locale_config("fr") is fr
        assert remove_custom_locale("fr")
        assert get_available_locales() == ["en", "ar"]

    def test_register_locale(self):
        assert register_locale("de", de)
        assert "de" in get_builtin_locales()
        assert get_locale_info("de").is_builtin

    def test_get_locale_falls_back(self):
        """get_locale resolves unknown codes to English."""
        assert get_locale("xx") is en
        assert get_locale() is en

    def test_init_locale(self):
        assert init_locale("xx") is False
        assert get_current_locale() == "en"

    def test_reset_to_defaults(self):
        register_custom_locale("fr", fr)
        set_locale("fr")
        reset_to_defaults()
        assert get_current_locale() == "en"
        assert get_available_locales() == ["en", "ar"]

    def test_locale_context_restores(self):
        """locale_context switches temporarily."""
        set_locale("en")
        with locale_context("ar") as ctx:
            assert ctx.registry.current == "ar"
            assert get_current_locale() == "ar"
        assert get_current_locale() == "en"

    def test_locale_context_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with locale_context("ar"):
                raise RuntimeError("boom")
        assert get_current_locale() == "en"
