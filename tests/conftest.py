"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from burger_shop.config import Settings
from burger_shop.containers import AppContainer, build_container
from burger_shop.services.burgers import BurgerService, Notifier


@dataclass
class RecordingNotifier(Notifier):
    """Notifier that records notices instead of printing them."""

    messages: list[str] = field(default_factory=list)

    def notify(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def settings() -> Settings:
    return Settings(currency_symbol="$", language="en", debug=False)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def burger_service(notifier: RecordingNotifier) -> BurgerService:
    return BurgerService(notifier)


@pytest.fixture
def container(settings: Settings, notifier: RecordingNotifier) -> AppContainer:
    return build_container(settings, notifier=notifier)
