"""Application service: Apply Discounts use case.

Registering a new rule and applying discounts happen in one step, the
same way the interactive menu offers them.  Every registered rule is
re-applied to every product, not just the new one.
"""

from __future__ import annotations

from shopcart.application.dto import CATEGORY, PROMOTION, DiscountSpec
from shopcart.domain.events import DiscountApplied
from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.discount import (
    CategoryDiscount,
    DiscountStrategy,
    PromotionDiscount,
)


def build_strategy(spec: DiscountSpec) -> DiscountStrategy:
    if spec.kind == CATEGORY:
        return CategoryDiscount(category=spec.target, rate=spec.rate)
    if spec.kind == PROMOTION:
        return PromotionDiscount(code=spec.target, rate=spec.rate)
    raise ValidationError(
        f"Unknown discount type '{spec.kind}' (expected '{CATEGORY}' or '{PROMOTION}')"
    )


class ApplyDiscountHandler:

    def __init__(self, cart: ShoppingCart) -> None:
        self._cart = cart

    def register(self, spec: DiscountSpec) -> DiscountStrategy:
        """Add a rule to the cart without applying anything yet."""
        strategy = build_strategy(spec)
        self._cart.add_discount_strategy(strategy)
        return strategy

    def handle(self, spec: DiscountSpec | None = None) -> list[DiscountApplied]:
        """Register *spec* (if given), then apply all rules to all products.

        With no spec the existing rules are applied again, compounding
        any earlier discounts.
        """
        if spec is not None:
            self.register(spec)
        return self._cart.apply_discounts()
