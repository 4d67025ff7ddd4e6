"""Greeting application service."""

from solid_principles.domain.greeting.language_provider import LanguageProvider


class GreetingService:
    """Greets using whichever language provider it was configured with.

    Adding a language means adding a provider; this class never changes.
    """

    def __init__(self, language_provider: LanguageProvider):
        self.language_provider = language_provider

    def execute(self) -> str:
        """Return a greeting for the configured language provider."""
        return self.language_provider.greet()
