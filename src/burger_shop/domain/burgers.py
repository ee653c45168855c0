"""Domain models for burgers and their add-on policies."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from burger_shop.domain.ingredients import Ingredient
from burger_shop.domain.pricing import to_price

INTEGRAL_BUN = "Integral"


@dataclass(frozen=True)
class BurgerPolicy:
    """Rules governing which add-ons a burger accepts after construction.

    ``max_additions`` caps the number of held ingredients; ``None`` means no
    cap. ``locked`` rejects every add attempt. ``fixed_bun`` forces the bun
    type, and ``included`` ingredients are appended once at construction,
    outside the gate.
    """

    label: str
    max_additions: int | None = None
    locked: bool = False
    fixed_bun: str | None = None
    included: tuple[Ingredient, ...] = ()


class BurgerKind(Enum):
    """Closed set of burger variants (single source of truth for policies)."""

    CLASSIC = BurgerPolicy("classic", max_additions=4)
    HEALTHY = BurgerPolicy("healthy", max_additions=6, fixed_bun=INTEGRAL_BUN)
    PREMIUM = BurgerPolicy(
        "premium",
        locked=True,
        included=(
            Ingredient("Fries", Decimal("3.50")),
            Ingredient("Drink", Decimal("2.50")),
        ),
    )

    @property
    def policy(self) -> BurgerPolicy:
        return self.value


class AddResult(Enum):
    """Outcome of an add-on attempt."""

    ADDED = "added"
    REJECTED_FULL = "rejected_full"
    REJECTED_LOCKED = "rejected_locked"

    @property
    def accepted(self) -> bool:
        return self is AddResult.ADDED


@dataclass
class Burger:
    """A priced burger with an ordered list of add-on ingredients."""

    kind: BurgerKind
    bun_type: str
    protein_type: str
    base_price: Decimal
    ingredients: list[Ingredient] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        if not self.bun_type or not self.bun_type.strip():
            raise ValueError("Bun type must not be empty")
        if not self.protein_type or not self.protein_type.strip():
            raise ValueError("Protein type must not be empty")
        fixed_bun = self.kind.policy.fixed_bun
        if fixed_bun is not None and self.bun_type != fixed_bun:
            raise ValueError(
                f"{self.kind.policy.label} burgers always use {fixed_bun} bun"
            )
        self.base_price = to_price(self.base_price)
        self.ingredients.extend(self.kind.policy.included)


def create_burger(
    kind: BurgerKind,
    protein_type: str,
    base_price: Decimal | int | float | str,
    bun_type: str | None = None,
) -> Burger:
    """Build a burger of any kind, resolving a fixed bun when the kind has one."""
    policy = kind.policy
    resolved_bun = bun_type if bun_type is not None else policy.fixed_bun
    if resolved_bun is None:
        raise ValueError(f"{policy.label} burgers need a bun type")
    return Burger(
        kind=kind,
        bun_type=resolved_bun,
        protein_type=protein_type,
        base_price=base_price,
    )


def classic_burger(
    bun_type: str, protein_type: str, base_price: Decimal | int | float | str
) -> Burger:
    """Classic burger: up to four add-ons."""
    return create_burger(BurgerKind.CLASSIC, protein_type, base_price, bun_type)


def healthy_burger(
    protein_type: str, base_price: Decimal | int | float | str
) -> Burger:
    """Healthy burger: integral bun, up to six add-ons."""
    return create_burger(BurgerKind.HEALTHY, protein_type, base_price)


def premium_burger(
    bun_type: str, protein_type: str, base_price: Decimal | int | float | str
) -> Burger:
    """Premium burger: fries and drink included, no further add-ons."""
    return create_burger(BurgerKind.PREMIUM, protein_type, base_price, bun_type)


def try_add_ingredient(burger: Burger, ingredient: Ingredient) -> AddResult:
    """Append an ingredient if the burger's policy allows it.

    Rejections leave the burger untouched.
    """
    policy = burger.kind.policy
    if policy.locked:
        return AddResult.REJECTED_LOCKED
    if (
        policy.max_additions is not None
        and len(burger.ingredients) >= policy.max_additions
    ):
        return AddResult.REJECTED_FULL
    burger.ingredients.append(ingredient)
    return AddResult.ADDED


def add_ons_subtotal(burger: Burger) -> Decimal:
    return sum((item.price for item in burger.ingredients), Decimal("0"))


def total_price(burger: Burger) -> Decimal:
    """Return the base price plus every held add-on."""
    return burger.base_price + add_ons_subtotal(burger)
