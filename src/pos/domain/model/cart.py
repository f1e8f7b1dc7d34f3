"""Cart: an ordered list of (product, quantity) lines.

The cart never owns products.  Each line keeps the product's catalog ID
as a handle; the checkout service resolves it through the repository
when the cart is settled.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import EntityNotFoundError, InsufficientStockError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class CartLine:

    product_id: str
    product_name: str
    quantity: Quantity


class Cart:
    """Aggregate for a single shopping session.

    Invariant checked at add time: the quantity requested for a product
    across all lines never exceeds the product's stock *at that moment*.
    Nothing is reserved, so checkout validates stock again.
    """

    def __init__(self) -> None:
        self._lines: list[CartLine] = []

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def quantity_of(self, product_id: str) -> int:
        """Total quantity already in the cart for *product_id*."""
        return sum(
            line.quantity.value
            for line in self._lines
            if line.product_id == product_id
        )

    def add(self, product: Product, quantity: int) -> None:
        """Append a line.  The cart is left unchanged if this raises."""
        qty = Quantity(quantity)
        requested = self.quantity_of(product.id) + qty.value
        if requested > product.quantity:
            raise InsufficientStockError(product.name, requested, product.quantity)
        self._lines.append(
            CartLine(product_id=product.id, product_name=product.name, quantity=qty)
        )

    def remove(self, product_id: str) -> None:
        """Drop every line for *product_id*."""
        remaining = [line for line in self._lines if line.product_id != product_id]
        if len(remaining) == len(self._lines):
            raise EntityNotFoundError(f"Product ID '{product_id}' is not in the cart")
        self._lines = remaining

    def clear(self) -> None:
        self._lines.clear()
