"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from pos.application.show_catalog import ShowCatalogHandler
from pos.infrastructure.bootstrap import product_repository


@click.command("list")
def catalog_list() -> None:
    """List products with price, stock, expiry and weight."""
    handler = ShowCatalogHandler(product_repo=product_repository())
    lines = handler.handle()

    if not lines:
        click.echo("No products found.")
        return

    click.echo(f"{'Product':<20} {'Price':>10} {'Stock':>7} {'Expires':>22} {'Weight':>8}")
    click.echo("-" * 71)
    for line in lines:
        click.echo(
            f"{line.name:<20} {line.price:>10} {line.stock:>7} {line.expires:>22} {line.weight:>8}"
        )
