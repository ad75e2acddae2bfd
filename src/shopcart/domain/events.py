"""Events emitted by the cart aggregate.

The cart hands each event to its subscribed listeners
(``ShoppingCart.subscribe``) at the moment it happens.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class ProductAdded:
    product_name: str


@dataclass(frozen=True)
class DiscountApplied:
    """A strategy rewrote a product's price."""

    product_name: str
    kind: str  # "category" or "promotion"
    new_price: Decimal


CartEvent = Union[ProductAdded, DiscountApplied]
