"""Application service: Show Total use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CartTotalDTO
from shopcart.domain.model.cart import ShoppingCart


class ShowTotalHandler:

    def __init__(self, cart: ShoppingCart) -> None:
        self._cart = cart

    def handle(self) -> CartTotalDTO:
        return CartTotalDTO(
            product_count=len(self._cart.products),
            total_cost=self._cart.total_cost(),
        )
