"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class ShipmentLineDTO:
    description: str  # e.g. "2x Cheese    400g"
    weight: str  # formatted, e.g. "0.4kg"


@dataclass(frozen=True)
class ReceiptLineDTO:
    """Output: a single receipt line as displayed to the user."""

    product_name: str
    quantity: int
    line_total: str  # formatted, e.g. "150.00"


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a settled checkout as displayed to the user."""

    customer_name: str
    items: list[ReceiptLineDTO]
    shipment: list[ShipmentLineDTO]
    total_weight: str | None
    subtotal: str
    shipping: str
    total: str
    balance: str


@dataclass(frozen=True)
class CatalogLineDTO:
    name: str
    price: str
    stock: int
    expires: str  # "-" when the product never expires
    weight: str  # "-" when the product is not shippable
