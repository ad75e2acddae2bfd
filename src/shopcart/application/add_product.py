"""Application service: Add Product use case."""

from __future__ import annotations

from shopcart.application.dto import ProductLineDTO, ProductSpec
from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.product import Product, ProductSnapshot


class AddProductHandler:

    def __init__(self, cart: ShoppingCart) -> None:
        self._cart = cart

    def handle(self, spec: ProductSpec) -> ProductLineDTO:
        """Add a new product to the cart exactly as entered."""
        product = Product(
            name=spec.name,
            category=spec.category,
            price=spec.price,
            tax_rate=spec.tax_rate,
            shipping_cost=spec.shipping_cost,
        )
        stored = self._cart.add_product(product)
        return ProductLineDTO.from_snapshot(ProductSnapshot.of(stored))
