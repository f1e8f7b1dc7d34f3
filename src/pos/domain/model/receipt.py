"""Results of a successful checkout.

These are plain immutable records built by the checkout service.  They
hold values, not text; rendering lives in the infrastructure layer.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.value_objects import Money, Weight


@dataclass(frozen=True)
class ShipmentLine:

    product_name: str
    quantity: int
    weight: Weight  # unit weight × quantity

    @property
    def description(self) -> str:
        return f"{self.quantity}x {self.product_name}    {self.weight.grams}g"


@dataclass(frozen=True)
class ShipmentNotice:

    lines: tuple[ShipmentLine, ...]

    @property
    def total_weight(self) -> Weight:
        total = self.lines[0].weight
        for line in self.lines[1:]:
            total = total + line.weight
        return total


@dataclass(frozen=True)
class ReceiptLine:

    product_name: str
    quantity: int
    line_total: Money


@dataclass(frozen=True)
class Receipt:
    """Everything a checkout settled.

    ``balance`` is the customer's balance *after* payment.
    """

    customer_name: str
    lines: tuple[ReceiptLine, ...]
    shipment: ShipmentNotice | None
    subtotal: Money
    shipping: Money
    total: Money
    balance: Money
