"""Language provider registry."""

import threading
from typing import Callable, Dict, List, Optional

from solid_principles.domain.core.exceptions import UnsupportedLocaleError
from solid_principles.domain.greeting.language_provider import (
    EnLanguageProvider,
    FrLanguageProvider,
    Greeter,
)
from solid_principles.infrastructure.logging.logger import get_logger


class LanguageProviderRegistry:
    """Registry mapping locale codes to language provider factories."""

    def __init__(self):
        """Initialize language provider registry."""
        self._providers: Dict[str, Callable[[], Greeter]] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def register_provider(self, locale: str, provider_factory: Callable[[], Greeter]) -> None:
        """
        Register a language provider.

        Args:
            locale: Locale code (e.g., 'en', 'fr')
            provider_factory: Factory function that creates the provider instance
        """
        locale = locale.lower()
        with self._lock:
            if locale in self._providers:
                self.logger.warning("Overriding existing language provider", locale=locale)

            self._providers[locale] = provider_factory
            self.logger.debug("Registered language provider", locale=locale)

    def get_provider(self, locale: str) -> Greeter:
        """
        Get a language provider instance.

        Args:
            locale: Locale code

        Returns:
            Language provider instance

        Raises:
            UnsupportedLocaleError: If no provider is registered for the locale
        """
        with self._lock:
            factory = self._providers.get(locale.lower())
            available = sorted(self._providers)

        if factory is None:
            raise UnsupportedLocaleError(locale, available)
        return factory()

    def list_locales(self) -> List[str]:
        """List all registered locale codes."""
        with self._lock:
            return sorted(self._providers)

    def is_registered(self, locale: str) -> bool:
        """Check if a locale is registered."""
        with self._lock:
            return locale.lower() in self._providers


# Global registry instance
_language_registry: Optional[LanguageProviderRegistry] = None
_registry_lock = threading.Lock()


def get_language_registry() -> LanguageProviderRegistry:
    """
    Get the global language provider registry, pre-loaded with built-in locales.

    Returns:
        Global language provider registry
    """
    global _language_registry

    if _language_registry is None:
        with _registry_lock:
            if _language_registry is None:
                registry = LanguageProviderRegistry()
                registry.register_provider(EnLanguageProvider.locale, EnLanguageProvider)
                registry.register_provider(FrLanguageProvider.locale, FrLanguageProvider)
                _language_registry = registry

    return _language_registry
