"""Integration tests for the cart use-case handlers.

Each test works on a fresh in-memory cart.
"""

from decimal import Decimal

import pytest

from shopcart.application.add_product import AddProductHandler
from shopcart.application.apply_discount import ApplyDiscountHandler, build_strategy
from shopcart.application.dto import CATEGORY, PROMOTION, DiscountSpec, ProductSpec
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.show_total import ShowTotalHandler
from shopcart.domain.events import ProductAdded
from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.discount import CategoryDiscount, PromotionDiscount


def _spec(name: str = "Widget", category: str = "Tools", price: str = "100") -> ProductSpec:
    return ProductSpec(
        name=name,
        category=category,
        price=Decimal(price),
        tax_rate=Decimal("0.1"),
        shipping_cost=Decimal("5"),
    )


def _setup(*specs: ProductSpec) -> ShoppingCart:
    cart = ShoppingCart()
    handler = AddProductHandler(cart)
    for spec in specs:
        handler.handle(spec)
    return cart


class TestAddProduct:

    def test_returns_line_with_total(self):
        cart = ShoppingCart()
        line = AddProductHandler(cart).handle(_spec())
        assert line.name == "Widget"
        assert line.total_cost == Decimal("115")

    def test_product_lands_in_cart(self):
        events = []
        cart = ShoppingCart(listeners=[events.append])
        AddProductHandler(cart).handle(_spec())
        assert len(cart.products) == 1
        assert events == [ProductAdded("Widget")]

    def test_empty_name_accepted(self):
        cart = ShoppingCart()
        line = AddProductHandler(cart).handle(_spec(name=""))
        assert line.name == ""


class TestBuildStrategy:

    def test_category(self):
        strategy = build_strategy(DiscountSpec(CATEGORY, "Tools", Decimal("0.2")))
        assert strategy == CategoryDiscount("Tools", Decimal("0.2"))

    def test_promotion(self):
        strategy = build_strategy(DiscountSpec(PROMOTION, "SAVE", Decimal("0.1")))
        assert strategy == PromotionDiscount("SAVE", Decimal("0.1"))

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError, match="Unknown discount type"):
            build_strategy(DiscountSpec("bogus", "x", Decimal("0.1")))


class TestApplyDiscount:

    def test_registers_and_applies(self):
        cart = _setup(_spec())
        events = ApplyDiscountHandler(cart).handle(
            DiscountSpec(CATEGORY, "Tools", Decimal("0.2"))
        )
        assert len(events) == 1
        assert cart.products[0].price == Decimal("80")
        assert len(cart.discount_strategies) == 1

    def test_every_rule_reapplied_when_a_new_one_is_added(self):
        cart = _setup(_spec())
        handler = ApplyDiscountHandler(cart)
        handler.handle(DiscountSpec(CATEGORY, "Tools", Decimal("0.5")))
        handler.handle(DiscountSpec(PROMOTION, "X", Decimal("0.5")))
        # 100 -> 50 (first call), then 50 -> 25 -> 12.5 (both rules)
        assert cart.products[0].price == Decimal("12.5")

    def test_without_spec_reapplies_existing(self):
        cart = _setup(_spec())
        handler = ApplyDiscountHandler(cart)
        handler.handle(DiscountSpec(CATEGORY, "Tools", Decimal("0.2")))
        handler.handle(None)
        assert cart.products[0].price == Decimal("64")
        assert len(cart.discount_strategies) == 1

    def test_register_does_not_apply(self):
        cart = _setup(_spec())
        ApplyDiscountHandler(cart).register(DiscountSpec(PROMOTION, "X", Decimal("0.5")))
        assert cart.products[0].price == Decimal("100")


class TestQueries:

    def test_total_on_empty_cart(self):
        dto = ShowTotalHandler(ShoppingCart()).handle()
        assert dto.product_count == 0
        assert dto.total_cost == Decimal("0")

    def test_total_counts_products(self):
        dto = ShowTotalHandler(_setup(_spec("A"), _spec("B"))).handle()
        assert dto.product_count == 2
        assert dto.total_cost == Decimal("230")

    def test_list_in_insertion_order(self):
        lines = ListProductsHandler(_setup(_spec("B"), _spec("A"))).handle()
        assert [line.name for line in lines] == ["B", "A"]
