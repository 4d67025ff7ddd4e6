"""Language providers - greeting capability and its built-in variants."""

from abc import ABC, abstractmethod


class Greeter(ABC):
    """Capability contract for anything that can produce a greeting."""

    @abstractmethod
    def greet(self) -> str:
        """Return a localized greeting."""


class EnLanguageProvider(Greeter):
    """Returns a greeting in English."""

    locale = "en"

    def greet(self) -> str:
        return "Hello"


class FrLanguageProvider(Greeter):
    """Returns a greeting in French."""

    locale = "fr"

    def greet(self) -> str:
        return "Bonjour"


# Alias matching the name used by the greeting service constructor
LanguageProvider = Greeter
