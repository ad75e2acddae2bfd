"""Data Transfer Objects — plain containers that cross layer boundaries.

Inputs carry already-parsed values from the session into the handlers;
outputs carry snapshots back out for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopcart.domain.model.product import ProductSnapshot

CATEGORY = "category"
PROMOTION = "promotion"


@dataclass(frozen=True)
class ProductSpec:
    """Input: the five fields of a new product."""

    name: str
    category: str
    price: Decimal
    tax_rate: Decimal
    shipping_cost: Decimal


@dataclass(frozen=True)
class DiscountSpec:
    """Input: a discount rule to register.

    ``target`` is the category for a category discount and the
    promotion code for a promotion.
    """

    kind: str  # CATEGORY or PROMOTION
    target: str
    rate: Decimal


@dataclass(frozen=True)
class ProductLineDTO:
    """Output: a single product as displayed to the user."""

    name: str
    category: str
    price: Decimal
    tax_rate: Decimal
    shipping_cost: Decimal
    total_cost: Decimal

    @staticmethod
    def from_snapshot(snapshot: ProductSnapshot) -> ProductLineDTO:
        return ProductLineDTO(
            name=snapshot.name,
            category=snapshot.category,
            price=snapshot.price,
            tax_rate=snapshot.tax_rate,
            shipping_cost=snapshot.shipping_cost,
            total_cost=snapshot.total_cost,
        )


@dataclass(frozen=True)
class CartTotalDTO:
    product_count: int
    total_cost: Decimal
