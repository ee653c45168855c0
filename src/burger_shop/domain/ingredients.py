"""Domain models for add-on ingredients."""

from dataclasses import dataclass
from decimal import Decimal

from burger_shop.domain.pricing import to_price


@dataclass(frozen=True)
class Ingredient:
    """Named price addition held by a single burger."""

    name: str
    price: Decimal

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Ingredient name must not be empty")
        # frozen, so bypass __setattr__ for the coerced value
        object.__setattr__(self, "price", to_price(self.price))
