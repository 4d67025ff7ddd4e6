from unittest.mock import Mock

import pytest

from solid_principles.application.greeting.service import GreetingService
from solid_principles.domain.greeting.language_provider import (
    EnLanguageProvider,
    FrLanguageProvider,
    Greeter,
)


@pytest.mark.parametrize("provider", [EnLanguageProvider(), FrLanguageProvider()])
def test_execute_returns_provider_greeting(provider):
    assert GreetingService(provider).execute() == provider.greet()


def test_substituting_provider_changes_only_the_result(make_greeter):
    first = GreetingService(make_greeter("Hola"))
    second = GreetingService(make_greeter("Ciao"))

    assert first.execute() == "Hola"
    assert second.execute() == "Ciao"


def test_execute_delegates_exactly_once():
    provider = Mock(spec=Greeter)
    provider.greet.return_value = "Hallo"

    result = GreetingService(provider).execute()

    assert result == "Hallo"
    provider.greet.assert_called_once_with()


def test_service_holds_the_injected_provider():
    provider = FrLanguageProvider()

    assert GreetingService(provider).language_provider is provider
