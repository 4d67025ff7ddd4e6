"""Tests for the language provider registry."""

import pytest

from solid_principles.domain.core.exceptions import UnsupportedLocaleError
from solid_principles.domain.greeting.language_provider import (
    EnLanguageProvider,
    FrLanguageProvider,
)
from solid_principles.infrastructure.registry.language_registry import (
    LanguageProviderRegistry,
    get_language_registry,
)


class TestLanguageProviderRegistry:
    """Test cases for LanguageProviderRegistry."""

    def test_register_and_get_provider(self):
        registry = LanguageProviderRegistry()
        registry.register_provider("en", EnLanguageProvider)

        provider = registry.get_provider("en")

        assert isinstance(provider, EnLanguageProvider)
        assert registry.is_registered("en")

    def test_locale_lookup_is_case_insensitive(self):
        registry = LanguageProviderRegistry()
        registry.register_provider("FR", FrLanguageProvider)

        assert registry.is_registered("fr")
        assert registry.get_provider("Fr").greet() == "Bonjour"

    def test_unknown_locale_raises(self):
        registry = LanguageProviderRegistry()
        registry.register_provider("en", EnLanguageProvider)

        with pytest.raises(UnsupportedLocaleError) as exc_info:
            registry.get_provider("de")

        assert exc_info.value.locale == "de"
        assert exc_info.value.available == ["en"]

    def test_register_overrides_existing_provider(self, make_greeter):
        registry = LanguageProviderRegistry()
        registry.register_provider("en", EnLanguageProvider)
        registry.register_provider("en", lambda: make_greeter("Hi"))

        assert registry.get_provider("en").greet() == "Hi"
        assert registry.list_locales() == ["en"]

    def test_each_lookup_builds_new_provider(self):
        registry = LanguageProviderRegistry()
        registry.register_provider("en", EnLanguageProvider)

        assert registry.get_provider("en") is not registry.get_provider("en")


def test_global_registry_has_builtin_locales():
    registry = get_language_registry()

    assert registry is get_language_registry()
    assert {"en", "fr"} <= set(registry.list_locales())
    assert registry.get_provider("en").greet() != registry.get_provider("fr").greet()
