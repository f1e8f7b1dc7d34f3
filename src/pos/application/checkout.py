"""Application service: Checkout use case.

Runs the checkout domain service and maps the resulting Receipt to a
DTO for the CLI.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from pos.application.dto import ReceiptDTO, ReceiptLineDTO, ShipmentLineDTO
from pos.domain.model.cart import Cart
from pos.domain.model.customer import Customer
from pos.domain.model.receipt import Receipt
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.checkout_service import (
    SHIPPING_RATE_PER_KG,
    CheckoutService,
    utc_now,
)


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = utc_now,
        shipping_rate: Money = SHIPPING_RATE_PER_KG,
    ) -> None:
        self._service = CheckoutService(product_repo, clock, shipping_rate)

    def handle(self, customer: Customer, cart: Cart) -> ReceiptDTO:
        receipt = self._service.checkout(customer, cart)
        return self._to_dto(receipt)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(receipt: Receipt) -> ReceiptDTO:
        shipment = receipt.shipment
        return ReceiptDTO(
            customer_name=receipt.customer_name,
            items=[
                ReceiptLineDTO(
                    product_name=line.product_name,
                    quantity=line.quantity,
                    line_total=str(line.line_total),
                )
                for line in receipt.lines
            ],
            shipment=[
                ShipmentLineDTO(description=line.description, weight=str(line.weight))
                for line in (shipment.lines if shipment else ())
            ],
            total_weight=str(shipment.total_weight) if shipment else None,
            subtotal=str(receipt.subtotal),
            shipping=str(receipt.shipping),
            total=str(receipt.total),
            balance=str(receipt.balance),
        )
