"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from pos.domain.model.customer import Customer
from pos.domain.model.product import ExpiryFacet, Product, ShippingFacet
from pos.domain.model.value_objects import Money, Weight
from pos.domain.service.checkout_service import utc_now
from pos.infrastructure.catalog.in_memory_product_repository import (
    InMemoryProductRepository,
)

DEMO_CUSTOMER_NAME = "Ibrahim"
DEMO_CUSTOMER_BALANCE = "1000"
DEMO_CART = (("Cheese", 1), ("Biscuits", 1), ("Scratch Card", 1))


def demo_catalog(now: datetime | None = None) -> list[Product]:
    """The store's starting stock; perishables expire a day after *now*."""
    tomorrow = ExpiryFacet((now or utc_now()) + timedelta(days=1))
    return [
        Product(
            id="1", name="Cheese", price=Money.of("100"), quantity=10,
            expiry=tomorrow, shipping=ShippingFacet(Weight.of("0.2")),
        ),
        Product(
            id="2", name="Biscuits", price=Money.of("150"), quantity=5,
            expiry=tomorrow, shipping=ShippingFacet(Weight.of("0.7")),
        ),
        Product(
            id="3", name="TV", price=Money.of("5000"), quantity=3,
            shipping=ShippingFacet(Weight.of("10")),
        ),
        Product(id="4", name="Scratch Card", price=Money.of("50"), quantity=100),
    ]


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository(demo_catalog())


def demo_customer() -> Customer:
    return Customer(DEMO_CUSTOMER_NAME, Money.of(DEMO_CUSTOMER_BALANCE))
