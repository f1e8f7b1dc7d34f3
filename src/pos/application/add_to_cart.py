"""Application service: Add To Cart use case."""

from __future__ import annotations

from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.cart import Cart
from pos.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, cart: Cart, product_name: str, quantity: int) -> None:
        """Resolve *product_name* in the catalog and add it to *cart*."""
        product = self._product_repo.get_by_name(product_name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{product_name}'")
        cart.add(product, quantity)
