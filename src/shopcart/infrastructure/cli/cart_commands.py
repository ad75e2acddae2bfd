"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from shopcart.application.commands import (
    AddDiscount,
    AddProduct,
    ApplyDiscounts,
    ListProducts,
    ShowTotal,
)
from shopcart.application.dto import CATEGORY, PROMOTION, DiscountSpec, ProductSpec
from shopcart.domain.exceptions import DomainException
from shopcart.domain.model.value_objects import parse_decimal
from shopcart.infrastructure.bootstrap import command_dispatcher
from shopcart.infrastructure.cli.session import run_session


def _parse_product(raw: str) -> ProductSpec:
    """Parse 'Widget:Tools:100:0.1:5' into a ProductSpec."""
    parts = [p.strip() for p in raw.split(":")]
    if len(parts) != 5:
        raise click.BadParameter(
            f"Invalid product format '{raw}'. "
            "Expected 'Name:Category:Price:TaxRate:ShippingCost'."
        )
    name, category, price, tax_rate, shipping_cost = parts
    try:
        return ProductSpec(
            name=name,
            category=category,
            price=parse_decimal(price, field="price"),
            tax_rate=parse_decimal(tax_rate, field="tax rate"),
            shipping_cost=parse_decimal(shipping_cost, field="shipping cost"),
        )
    except DomainException as exc:
        raise click.BadParameter(f"{exc} in product '{raw}'.")


def _parse_discount(raw: str, kind: str) -> DiscountSpec:
    """Parse 'Tools:0.2' (or 'CODE:0.1') into a DiscountSpec."""
    if ":" not in raw:
        raise click.BadParameter(
            f"Invalid discount format '{raw}'. Expected 'Target:Rate'."
        )
    target, rate = raw.rsplit(":", 1)
    try:
        return DiscountSpec(
            kind=kind, target=target.strip(), rate=parse_decimal(rate, field="rate")
        )
    except DomainException as exc:
        raise click.BadParameter(f"{exc} in discount '{raw}'.")


@click.command("session")
def cart_session() -> None:
    """Start an interactive cart session."""
    run_session(command_dispatcher())


@click.command("quote")
@click.option(
    "--product", "products", multiple=True, required=True,
    help="Product as 'Name:Category:Price:TaxRate:ShippingCost' (repeatable).",
)
@click.option(
    "--category-discount", "category_discounts", multiple=True,
    help="Category discount as 'Category:Rate' (repeatable).",
)
@click.option(
    "--promotion", "promotions", multiple=True,
    help="Promotion discount as 'Code:Rate' (repeatable).",
)
def cart_quote(
    products: tuple[str, ...],
    category_discounts: tuple[str, ...],
    promotions: tuple[str, ...],
) -> None:
    """Price a cart in one shot: add products, apply discounts once, show totals."""
    commands = [AddProduct(_parse_product(raw)) for raw in products]
    commands += [AddDiscount(_parse_discount(raw, CATEGORY)) for raw in category_discounts]
    commands += [AddDiscount(_parse_discount(raw, PROMOTION)) for raw in promotions]
    commands += [ApplyDiscounts(), ListProducts(), ShowTotal()]

    dispatcher = command_dispatcher()
    for command in commands:
        try:
            result = dispatcher.dispatch(command)
        except DomainException as exc:
            raise click.ClickException(str(exc))
        for line in result.lines:
            click.echo(line)
