"""Dependency container wiring for the application."""

from dataclasses import dataclass

from burger_shop.adapters.console_notifier import ConsoleNotifier
from burger_shop.config import Settings
from burger_shop.services.burgers import (
    LABELS_BY_LANGUAGE,
    BurgerService,
    Notifier,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    notifier: Notifier
    burger_service: BurgerService


def build_container(
    settings: Settings | None = None, notifier: Notifier | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_notifier = notifier or ConsoleNotifier()
    burger_service = BurgerService(
        notifier=resolved_notifier,
        labels=LABELS_BY_LANGUAGE[resolved_settings.language],
        currency_symbol=resolved_settings.currency_symbol,
    )
    return AppContainer(
        settings=resolved_settings,
        notifier=resolved_notifier,
        burger_service=burger_service,
    )
