"""Console runner printing the sample burger menu."""

from decimal import Decimal

from burger_shop.app_logging import configure_logging
from burger_shop.containers import AppContainer, build_container
from burger_shop.domain.burgers import (
    Burger,
    classic_burger,
    healthy_burger,
    premium_burger,
)
from burger_shop.domain.ingredients import Ingredient


def build_sample_burgers(container: AppContainer) -> list[Burger]:
    """Assemble the fixed sample order."""
    service = container.burger_service

    classic = classic_burger("Normal", "Res", Decimal("10.00"))
    for ingredient in (
        Ingredient("Lettuce", Decimal("0.50")),
        Ingredient("Tomato", Decimal("0.75")),
        Ingredient("Cheese", Decimal("1.50")),
        Ingredient("Bacon", Decimal("2.00")),
    ):
        service.add_ingredient(classic, ingredient)

    healthy = healthy_burger("Chicken", Decimal("12.00"))
    service.add_ingredient(healthy, Ingredient("Avocado", Decimal("2.00")))
    service.add_ingredient(healthy, Ingredient("Spinach", Decimal("1.00")))

    premium = premium_burger("Brioche", "Res Angus", Decimal("18.00"))
    return [classic, healthy, premium]


def main(container: AppContainer | None = None) -> None:
    """Print the welcome banner and a report for each sample burger."""
    container = container or build_container()
    configure_logging(debug=container.settings.debug)
    service = container.burger_service

    welcome = service.labels.welcome
    print(welcome)
    print("=" * len(welcome))
    burgers = build_sample_burgers(container)
    sections = [
        f"{service.title(burger)}\n{service.render(burger)}" for burger in burgers
    ]
    print()
    print("\n\n".join(sections))


if __name__ == "__main__":
    main()
