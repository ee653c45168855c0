"""Burger ordering service: gated add-ons, advisory notices and reports."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol

from burger_shop.domain.burgers import (
    AddResult,
    Burger,
    BurgerKind,
    add_ons_subtotal,
    total_price,
    try_add_ingredient,
)
from burger_shop.domain.ingredients import Ingredient
from burger_shop.domain.pricing import format_money

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportLabels:
    """User-facing text for one language."""

    header: str
    base_price: str
    added_ingredients: str
    add_ons_subtotal: str
    total_price: str
    maximum_reached: str
    no_additions_allowed: str
    welcome: str
    titles: tuple[tuple[BurgerKind, str], ...]

    def title_for(self, kind: BurgerKind) -> str:
        return dict(self.titles)[kind]


ENGLISH_LABELS = ReportLabels(
    header="Burger with {bun} bun, {protein} protein",
    base_price="Base price",
    added_ingredients="Added ingredients:",
    add_ons_subtotal="Add-ons subtotal",
    total_price="Total price",
    maximum_reached="Cannot add more ingredients. Maximum reached.",
    no_additions_allowed="Premium burgers do not allow additional ingredients.",
    welcome="Welcome to Chimi MiBurrica",
    titles=(
        (BurgerKind.CLASSIC, "CLASSIC BURGER:"),
        (BurgerKind.HEALTHY, "HEALTHY BURGER:"),
        (BurgerKind.PREMIUM, "PREMIUM BURGER:"),
    ),
)

SPANISH_LABELS = ReportLabels(
    header="Hamburguesa con pan {bun}, carne {protein}",
    base_price="Precio base",
    added_ingredients="Ingredientes adicionales:",
    add_ons_subtotal="Subtotal adicionales",
    total_price="Precio total",
    maximum_reached="No se pueden agregar más ingredientes. Máximo alcanzado.",
    no_additions_allowed=(
        "Las hamburguesas premium no permiten ingredientes adicionales."
    ),
    welcome="Bienvenido a Chimi MiBurrica",
    titles=(
        (BurgerKind.CLASSIC, "HAMBURGUESA CLÁSICA:"),
        (BurgerKind.HEALTHY, "HAMBURGUESA SALUDABLE:"),
        (BurgerKind.PREMIUM, "HAMBURGUESA PREMIUM:"),
    ),
)

LABELS_BY_LANGUAGE: dict[str, ReportLabels] = {
    "en": ENGLISH_LABELS,
    "es": SPANISH_LABELS,
}


class Notifier(Protocol):
    """Sink for advisory notices shown to the customer."""

    def notify(self, message: str) -> None:
        """Deliver a single notice."""


def render_details(
    burger: Burger,
    labels: ReportLabels = ENGLISH_LABELS,
    currency_symbol: str = "$",
) -> str:
    """Render the multi-line price report for a burger.

    The add-on section and its subtotal appear only when the burger holds at
    least one ingredient.
    """

    def money(amount: Decimal) -> str:
        return format_money(amount, currency_symbol)

    lines = [
        labels.header.format(bun=burger.bun_type, protein=burger.protein_type),
        f"{labels.base_price}: {money(burger.base_price)}",
    ]
    if burger.ingredients:
        lines.append(labels.added_ingredients)
        lines.extend(
            f"- {item.name}: {money(item.price)}" for item in burger.ingredients
        )
        lines.append(f"{labels.add_ons_subtotal}: {money(add_ons_subtotal(burger))}")
    lines.append(f"{labels.total_price}: {money(total_price(burger))}")
    return "\n".join(lines)


@dataclass
class BurgerService:
    """Application service wrapping the add-on gate with customer notices."""

    notifier: Notifier
    labels: ReportLabels = ENGLISH_LABELS
    currency_symbol: str = "$"

    def add_ingredient(self, burger: Burger, ingredient: Ingredient) -> AddResult:
        """Try to add an ingredient, notifying the customer on rejection."""
        result = try_add_ingredient(burger, ingredient)
        if result is AddResult.REJECTED_FULL:
            self.notifier.notify(self.labels.maximum_reached)
        elif result is AddResult.REJECTED_LOCKED:
            self.notifier.notify(self.labels.no_additions_allowed)
        if result.accepted:
            _logger.debug(
                "Added %s to %s burger (%s held)",
                ingredient.name,
                burger.kind.policy.label,
                len(burger.ingredients),
            )
        else:
            _logger.info(
                "Rejected %s for %s burger: %s",
                ingredient.name,
                burger.kind.policy.label,
                result.value,
            )
        return result

    def render(self, burger: Burger) -> str:
        """Render a burger report with the configured labels and currency."""
        return render_details(burger, self.labels, self.currency_symbol)

    def title(self, burger: Burger) -> str:
        return self.labels.title_for(burger.kind)
