"""Commands and the dispatcher that executes them.

The session parses user input into one of the command values below and
hands it to ``CommandDispatcher.dispatch``.  The dispatcher never reads
input or writes output itself: it returns a ``CommandResult`` whose
lines the caller prints.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

from shopcart.application.add_product import AddProductHandler
from shopcart.application.apply_discount import ApplyDiscountHandler
from shopcart.application.dto import DiscountSpec, ProductLineDTO, ProductSpec
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.show_total import ShowTotalHandler
from shopcart.domain.events import CartEvent, DiscountApplied, ProductAdded
from shopcart.domain.exceptions import UnknownCommandError
from shopcart.domain.model.cart import ShoppingCart
from shopcart.domain.model.value_objects import format_amount

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddProduct:
    spec: ProductSpec


@dataclass(frozen=True)
class AddDiscount:
    """Register a rule without applying it."""

    spec: DiscountSpec


@dataclass(frozen=True)
class ApplyDiscounts:
    """Register ``spec`` (when given) and apply every rule to every product."""

    spec: DiscountSpec | None = None


@dataclass(frozen=True)
class ShowTotal:
    pass


@dataclass(frozen=True)
class ListProducts:
    pass


@dataclass(frozen=True)
class Exit:
    pass


Command = Union[
    AddProduct, AddDiscount, ApplyDiscounts, ShowTotal, ListProducts, Exit
]


@dataclass(frozen=True)
class CommandResult:
    """Display payload: lines to print, and whether the session should end."""

    lines: tuple[str, ...] = ()
    exit: bool = False


# --- Formatting -------------------------------------------------------------


def format_event(event: CartEvent) -> str:
    if isinstance(event, ProductAdded):
        return f"{event.product_name} added to cart."
    if isinstance(event, DiscountApplied):
        return (
            f"{event.product_name} has {event.kind} discount applied: "
            f"new price {format_amount(event.new_price)}"
        )
    raise TypeError(f"Unsupported event {type(event).__name__}")


def format_product_line(line: ProductLineDTO) -> str:
    return (
        f"Product: {line.name}, Category: {line.category}, "
        f"Price: {format_amount(line.price)}, "
        f"Tax Rate: {format_amount(line.tax_rate)}, "
        f"Shipping Cost: {format_amount(line.shipping_cost)}, "
        f"Total Cost: {format_amount(line.total_cost)}"
    )


# --- Dispatcher -------------------------------------------------------------


class CommandDispatcher:

    def __init__(self, cart: ShoppingCart) -> None:
        self._cart = cart
        self._pending: list[CartEvent] = []
        cart.subscribe(self._pending.append)
        self._handlers: dict[type, Callable[[Command], CommandResult]] = {
            AddProduct: self._add_product,
            AddDiscount: self._add_discount,
            ApplyDiscounts: self._apply_discounts,
            ShowTotal: self._show_total,
            ListProducts: self._list_products,
            Exit: self._exit,
        }

    def dispatch(self, command: Command) -> CommandResult:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise UnknownCommandError(
                f"No handler for command {type(command).__name__}"
            )
        logger.debug("Dispatching %r", command)
        return handler(command)

    # --- Handlers -------------------------------------------------------------

    def _add_product(self, command: AddProduct) -> CommandResult:
        AddProductHandler(self._cart).handle(command.spec)
        return self._drain_events()

    def _add_discount(self, command: AddDiscount) -> CommandResult:
        ApplyDiscountHandler(self._cart).register(command.spec)
        return CommandResult()

    def _apply_discounts(self, command: ApplyDiscounts) -> CommandResult:
        ApplyDiscountHandler(self._cart).handle(command.spec)
        return self._drain_events()

    def _show_total(self, command: ShowTotal) -> CommandResult:
        dto = ShowTotalHandler(self._cart).handle()
        return CommandResult(lines=(f"Total cost: {format_amount(dto.total_cost)}",))

    def _list_products(self, command: ListProducts) -> CommandResult:
        products = ListProductsHandler(self._cart).handle()
        return CommandResult(lines=tuple(format_product_line(p) for p in products))

    def _exit(self, command: Exit) -> CommandResult:
        return CommandResult(lines=("Exiting...",), exit=True)

    def _drain_events(self) -> CommandResult:
        events = list(self._pending)
        self._pending.clear()
        return CommandResult(lines=tuple(format_event(e) for e in events))
