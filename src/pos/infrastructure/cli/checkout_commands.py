"""CLI commands for checking out a cart."""

from __future__ import annotations

import click

from pos.application.add_to_cart import AddToCartHandler
from pos.application.checkout import CheckoutHandler
from pos.application.dto import CartItemSpec
from pos.domain.exceptions import DomainException
from pos.domain.model.cart import Cart
from pos.domain.model.customer import Customer
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.infrastructure.bootstrap import (
    DEMO_CART,
    demo_customer,
    product_repository,
)
from pos.infrastructure.reporting import render_checkout


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'Cheese:2,TV:1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductName:Quantity'."
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartItemSpec(product_name=name.strip(), quantity=qty))
    return specs


def _run_checkout(
    product_repo: ProductRepository,
    customer: Customer,
    specs: list[CartItemSpec],
) -> None:
    """Fill a cart, check it out and print the reports.

    Any domain failure is reported on stderr; the command still exits 0.
    """
    cart = Cart()
    add = AddToCartHandler(product_repo)

    try:
        for spec in specs:
            add.handle(cart, spec.product_name, spec.quantity)
        dto = CheckoutHandler(product_repo).handle(customer, cart)
    except DomainException as exc:
        click.echo(f"Checkout failed: {exc}", err=True)
        return

    for line in render_checkout(dto):
        click.echo(line)


@click.command("checkout")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--balance", required=True, help="Customer balance, e.g. '1000.00'.")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
def checkout(customer: str, balance: str, items: str) -> None:
    """Check out a cart against the store catalog."""
    specs = _parse_items(items)

    try:
        buyer = Customer(customer, Money.of(balance))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _run_checkout(product_repository(), buyer, specs)


@click.command("demo")
def demo() -> None:
    """Run the reference checkout: cheese, biscuits and a scratch card."""
    specs = [CartItemSpec(name, qty) for name, qty in DEMO_CART]
    _run_checkout(product_repository(), demo_customer(), specs)
