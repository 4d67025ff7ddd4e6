"""Capability registries."""

from .language_registry import LanguageProviderRegistry, get_language_registry

__all__ = ["LanguageProviderRegistry", "get_language_registry"]
