"""Product entity.

A product is added to the cart by value and lives there for the rest of
the session.  Its price is the only field that changes afterwards, and
only because a discount strategy rewrote it.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Product:
    """A priced catalog entry with tax and shipping components.

    Nothing is validated: negative prices, tax rates outside 0..1 and
    empty names are all accepted as given.
    """

    name: str
    category: str
    price: Decimal
    tax_rate: Decimal
    shipping_cost: Decimal

    @property
    def total_cost(self) -> Decimal:
        """Price plus tax plus shipping, recomputed on every access."""
        return self.price + self.price * self.tax_rate + self.shipping_cost

    def set_price(self, new_price: Decimal) -> None:
        self.price = new_price


@dataclass(frozen=True)
class ProductSnapshot:
    """Read-only view of a product at the moment it was listed."""

    name: str
    category: str
    price: Decimal
    tax_rate: Decimal
    shipping_cost: Decimal
    total_cost: Decimal

    @staticmethod
    def of(product: Product) -> ProductSnapshot:
        return ProductSnapshot(
            name=product.name,
            category=product.category,
            price=product.price,
            tax_rate=product.tax_rate,
            shipping_cost=product.shipping_cost,
            total_cost=product.total_cost,
        )
