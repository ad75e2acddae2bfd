"""Discount strategies.

A strategy is an immutable rule.  Applying it rewrites the price of the
product it is handed and reports what it did; the strategy itself never
changes, so one instance can safely be applied to every product in the
cart, any number of times.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from shopcart.domain.events import DiscountApplied
from shopcart.domain.model.product import Product

logger = logging.getLogger(__name__)


class DiscountStrategy(ABC):

    @abstractmethod
    def apply_discount(self, product: Product) -> DiscountApplied | None:
        """Reduce *product*'s price if the rule covers it.

        Returns the event describing the change, or None when the
        product was left alone.
        """

    @abstractmethod
    def describe(self) -> str:
        """Short label for display."""


def _discounted(price: Decimal, rate: Decimal) -> Decimal:
    # Rates are not range-checked; rate >= 1 yields a zero or negative price.
    return price * (Decimal("1") - rate)


@dataclass(frozen=True)
class CategoryDiscount(DiscountStrategy):
    """Discount every product whose category matches exactly (case-sensitive)."""

    category: str
    rate: Decimal

    def apply_discount(self, product: Product) -> DiscountApplied | None:
        if product.category != self.category:
            return None
        new_price = _discounted(product.price, self.rate)
        product.set_price(new_price)
        logger.info(
            "%s has category discount applied: new price %s", product.name, new_price
        )
        return DiscountApplied(product.name, "category", new_price)

    def describe(self) -> str:
        return f"{self.rate} off category '{self.category}'"


@dataclass(frozen=True)
class PromotionDiscount(DiscountStrategy):
    """Discount every product in the cart.

    The promotion code is kept for display only.  It is never checked
    against anything, so the discount applies unconditionally.
    """

    code: str
    rate: Decimal

    def apply_discount(self, product: Product) -> DiscountApplied:
        new_price = _discounted(product.price, self.rate)
        product.set_price(new_price)
        logger.info(
            "%s has promotion discount applied: new price %s", product.name, new_price
        )
        return DiscountApplied(product.name, "promotion", new_price)

    def describe(self) -> str:
        return f"{self.rate} off everything (promotion '{self.code}')"
