"""Startup wiring for the CLI.

Commands get a fresh in-memory cart with a dispatcher bound to it, and
logging is configured here before any of them run.  Nothing outlives
the process.
"""

from __future__ import annotations

from pathlib import Path

from shopcart.application.commands import CommandDispatcher
from shopcart.domain.model.cart import ShoppingCart
from shopcart.infrastructure.logging_config import setup_logging


def new_cart() -> ShoppingCart:
    return ShoppingCart()


def command_dispatcher(cart: ShoppingCart | None = None) -> CommandDispatcher:
    return CommandDispatcher(cart if cart is not None else new_cart())


def configure(log_level: str = "WARNING", log_file: str | Path | None = None) -> None:
    setup_logging(level=log_level, log_file=log_file)
