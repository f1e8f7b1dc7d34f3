"""Domain service: Checkout.

Settles a cart against a customer's balance.  It lives in the domain
layer because every rule here (expiry, stock, shipping cost, funds) is a
core business rule.

The two-phase approach (validate-then-mutate) ensures a rejected
checkout never leaves stock or balance partially updated:
  Phase 1: resolve and validate every line, accumulate the totals.
           Fails fast on the first bad line, before any mutation.
  Phase 2: reduce stock, charge the customer, clear the cart.

The service provides no locking.  Running two checkouts that touch the
same products concurrently needs exclusive access to those products for
the duration of ``checkout()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable

from pos.domain.exceptions import (
    CheckoutError,
    EmptyCartError,
    EntityNotFoundError,
    InsufficientFundsError,
    InsufficientStockError,
    ProductExpiredError,
)
from pos.domain.model.cart import Cart
from pos.domain.model.customer import Customer
from pos.domain.model.product import Product
from pos.domain.model.receipt import Receipt, ReceiptLine, ShipmentLine, ShipmentNotice
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
SHIPPING_RATE_PER_KG = Money(Decimal("10"))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class _ValidatedLine:
    product: Product
    quantity: int


class CheckoutService:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = utc_now,
        shipping_rate: Money = SHIPPING_RATE_PER_KG,
    ) -> None:
        self._product_repo = product_repo
        self._clock = clock
        self._shipping_rate = shipping_rate

    def checkout(self, customer: Customer, cart: Cart) -> Receipt:
        """Validate and settle *cart* for *customer*.

        Raises a CheckoutError subclass (or EntityNotFoundError for a
        product that left the catalog) and mutates nothing on failure.
        """
        try:
            return self._checkout(customer, cart)
        except CheckoutError as exc:
            logger.warning("Checkout rejected for %s: %s", customer.name, exc)
            raise

    def _checkout(self, customer: Customer, cart: Cart) -> Receipt:
        if cart.is_empty():
            raise EmptyCartError()

        now = self._clock()
        subtotal = Money.zero(customer.balance.currency)
        shipping = Money.zero(customer.balance.currency)
        validated: list[_ValidatedLine] = []
        receipt_lines: list[ReceiptLine] = []
        shipment_lines: list[ShipmentLine] = []
        claimed: dict[str, int] = {}

        # Phase 1: validate every line and accumulate totals
        for line in cart.lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product '{line.product_name}' is no longer in the catalog"
                )

            if product.is_expired(now):
                raise ProductExpiredError(product.name)

            qty = line.quantity.value
            requested = claimed.get(product.id, 0) + qty
            if requested > product.quantity:
                raise InsufficientStockError(product.name, requested, product.quantity)
            claimed[product.id] = requested

            line_total = product.price * qty
            subtotal = subtotal + line_total
            receipt_lines.append(ReceiptLine(product.name, qty, line_total))

            if product.is_shippable():
                line_weight = product.weight * qty
                shipment_lines.append(ShipmentLine(product.name, qty, line_weight))
                shipping = shipping + self._shipping_rate * line_weight.kg

            validated.append(_ValidatedLine(product, qty))
            logger.debug("Validated %dx %s (%s)", qty, product.name, line_total)

        total = subtotal + shipping
        if not customer.can_afford(total):
            raise InsufficientFundsError(customer.balance.amount, total.amount)

        # Phase 2: settle
        for item in validated:
            item.product.reduce_quantity(item.quantity)
            self._product_repo.save(item.product)
        customer.pay(total)
        cart.clear()

        logger.info(
            "Checkout settled for %s: subtotal=%s shipping=%s total=%s balance=%s",
            customer.name, subtotal, shipping, total, customer.balance,
        )

        return Receipt(
            customer_name=customer.name,
            lines=tuple(receipt_lines),
            shipment=ShipmentNotice(tuple(shipment_lines)) if shipment_lines else None,
            subtotal=subtotal,
            shipping=shipping,
            total=total,
            balance=customer.balance,
        )
