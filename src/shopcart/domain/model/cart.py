"""ShoppingCart aggregate.

The cart owns two append-only lists: the products that were added and the
discount strategies that were registered.  Discounts are not applied when
a strategy is registered; ``apply_discounts()`` runs every strategy over
every product each time it is called, so repeated calls compound.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Callable, Iterable

from shopcart.domain.events import CartEvent, DiscountApplied, ProductAdded
from shopcart.domain.model.discount import DiscountStrategy
from shopcart.domain.model.product import Product, ProductSnapshot

logger = logging.getLogger(__name__)

EventListener = Callable[[CartEvent], None]


class ShoppingCart:
    """Aggregate root for a single shopping session.

    Invariants:
    - products and strategies keep insertion order
    - ``apply_discounts`` iterates products outer, strategies inner

    Events are handed to subscribed listeners as they happen; the cart
    keeps no copy of them.
    """

    def __init__(self, listeners: Iterable[EventListener] = ()) -> None:
        self._products: list[Product] = []
        self._strategies: list[DiscountStrategy] = []
        self._listeners: list[EventListener] = list(listeners)

    # --- Commands -------------------------------------------------------------

    def add_product(self, product: Product) -> Product:
        """Store a copy of *product* and return the stored instance."""
        stored = replace(product)
        self._products.append(stored)
        self._emit(ProductAdded(stored.name))
        logger.info("%s added to cart.", stored.name)
        return stored

    def add_discount_strategy(self, strategy: DiscountStrategy) -> None:
        self._strategies.append(strategy)
        logger.debug("Registered discount strategy: %s", strategy.describe())

    def apply_discounts(self) -> list[DiscountApplied]:
        """Run every registered strategy over every product, in order.

        Returns the events produced by this call, in the order they were
        emitted.
        """
        applied: list[DiscountApplied] = []
        for product in self._products:
            for strategy in self._strategies:
                event = strategy.apply_discount(product)
                if event is not None:
                    applied.append(event)
                    self._emit(event)
        logger.debug(
            "Applied %d strategies to %d products (%d price changes)",
            len(self._strategies),
            len(self._products),
            len(applied),
        )
        return applied

    # --- Queries --------------------------------------------------------------

    def total_cost(self) -> Decimal:
        total = Decimal("0")
        for product in self._products:
            total += product.total_cost
        return total

    def list_products(self) -> tuple[ProductSnapshot, ...]:
        return tuple(ProductSnapshot.of(p) for p in self._products)

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    @property
    def discount_strategies(self) -> tuple[DiscountStrategy, ...]:
        return tuple(self._strategies)

    # --- Events ---------------------------------------------------------------

    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def _emit(self, event: CartEvent) -> None:
        for listener in self._listeners:
            listener(event)
