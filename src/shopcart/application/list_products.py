"""Application service: List Products use case (query)."""

from __future__ import annotations

from shopcart.application.dto import ProductLineDTO
from shopcart.domain.model.cart import ShoppingCart


class ListProductsHandler:

    def __init__(self, cart: ShoppingCart) -> None:
        self._cart = cart

    def handle(self) -> list[ProductLineDTO]:
        return [ProductLineDTO.from_snapshot(s) for s in self._cart.list_products()]
