"""Greeting bounded context."""

from .language_provider import (
    EnLanguageProvider,
    FrLanguageProvider,
    Greeter,
    LanguageProvider,
)

__all__ = ["Greeter", "LanguageProvider", "EnLanguageProvider", "FrLanguageProvider"]
