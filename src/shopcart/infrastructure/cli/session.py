"""Interactive menu session.

Reads choices and fields with ``click.prompt``, turns them into command
values and prints whatever the dispatcher returns.  All cart logic lives
behind the dispatcher.

Input is consumed one whitespace-separated token at a time, so a whole
product can be typed on one line (``Widget Tools 100 0.1 5``) and any
leftover tokens answer the following prompts.
"""

from __future__ import annotations

from collections import deque
from decimal import Decimal

import click

from shopcart.application.commands import (
    AddProduct,
    ApplyDiscounts,
    Command,
    CommandDispatcher,
    Exit,
    ListProducts,
    ShowTotal,
)
from shopcart.application.dto import CATEGORY, PROMOTION, DiscountSpec, ProductSpec
from shopcart.domain.exceptions import DomainException, ValidationError
from shopcart.domain.model.value_objects import parse_decimal

MENU = (
    "1. Add product\n"
    "2. Apply discounts\n"
    "3. Calculate total cost\n"
    "4. List products\n"
    "5. Exit"
)

DISCOUNT_MENU = "Choose discount type:\n1. Category Discount\n2. Promotion Discount"

INVALID_CHOICE = "Invalid choice, please try again."


class DecimalType(click.ParamType):
    """click parameter type backed by ``parse_decimal``."""

    name = "decimal"

    def convert(self, value, param, ctx) -> Decimal:
        try:
            return parse_decimal(value, field=self.name)
        except ValidationError as exc:
            self.fail(str(exc), param, ctx)


DECIMAL = DecimalType()


class TokenPrompt:
    """Hands out one input token per field, prompting only when none are left."""

    def __init__(self) -> None:
        self._tokens: deque[str] = deque()

    def read(self, text: str, type: click.ParamType | None = None):
        while True:
            while not self._tokens:
                self._tokens.extend(click.prompt(text).split())
            token = self._tokens.popleft()
            if type is None:
                return token
            try:
                return type.convert(token, None, None)
            except click.BadParameter as exc:
                # Whatever followed a bad value was meant for later fields.
                self._tokens.clear()
                click.echo(f"Error: {exc.format_message()}")


def prompt_product(tokens: TokenPrompt) -> ProductSpec:
    return ProductSpec(
        name=tokens.read("Enter product name"),
        category=tokens.read("Enter product category"),
        price=tokens.read("Enter product price", type=DECIMAL),
        tax_rate=tokens.read("Enter tax rate (decimal)", type=DECIMAL),
        shipping_cost=tokens.read("Enter shipping cost", type=DECIMAL),
    )


def prompt_discount(tokens: TokenPrompt) -> DiscountSpec | None:
    """Ask for a discount rule.

    An unrecognised discount type yields None: no rule is added, but the
    existing rules are still applied.
    """
    click.echo(DISCOUNT_MENU)
    choice = tokens.read("Enter your choice")
    if choice == "1":
        category = tokens.read("Enter category for discount")
        rate = tokens.read("Enter discount rate (decimal)", type=DECIMAL)
        return DiscountSpec(kind=CATEGORY, target=category, rate=rate)
    if choice == "2":
        code = tokens.read("Enter promotion code")
        rate = tokens.read("Enter discount rate (decimal)", type=DECIMAL)
        return DiscountSpec(kind=PROMOTION, target=code, rate=rate)
    return None


def read_command(choice: str, tokens: TokenPrompt) -> Command | None:
    """Map a menu choice to a command, prompting for any fields it needs."""
    if choice == "1":
        return AddProduct(prompt_product(tokens))
    if choice == "2":
        return ApplyDiscounts(prompt_discount(tokens))
    if choice == "3":
        return ShowTotal()
    if choice == "4":
        return ListProducts()
    if choice == "5":
        return Exit()
    return None


def run_session(dispatcher: CommandDispatcher) -> None:
    """Loop over the menu until the user picks Exit."""
    tokens = TokenPrompt()
    while True:
        click.echo(MENU)
        command = read_command(tokens.read("Enter your choice"), tokens)
        if command is None:
            click.echo(INVALID_CHOICE)
            continue

        try:
            result = dispatcher.dispatch(command)
        except DomainException as exc:
            click.echo(f"Error: {exc}", err=True)
            continue

        for line in result.lines:
            click.echo(line)
        if result.exit:
            return
