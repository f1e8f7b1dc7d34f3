"""Test builders for catalog products and a controllable clock.

Products are stored in the real InMemoryProductRepository; there is no
file I/O to fake.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pos.domain.model.product import ExpiryFacet, Product, ShippingFacet
from pos.domain.model.value_objects import Money, Weight

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class FixedClock:
    """Callable clock that returns a settable instant."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


def make_product(
    id: str = "1",
    name: str = "Widget",
    price: str = "10.00",
    quantity: int = 10,
    expires_at: datetime | None = None,
    weight: str | None = None,
) -> Product:
    return Product(
        id=id,
        name=name,
        price=Money.of(price),
        quantity=quantity,
        expiry=ExpiryFacet(expires_at) if expires_at is not None else None,
        shipping=ShippingFacet(Weight.of(weight)) if weight is not None else None,
    )


def cheese(quantity: int = 10) -> Product:
    return make_product(
        "1", "Cheese", "100", quantity,
        expires_at=NOW + timedelta(days=1), weight="0.2",
    )


def biscuits(quantity: int = 5) -> Product:
    return make_product(
        "2", "Biscuits", "150", quantity,
        expires_at=NOW + timedelta(days=1), weight="0.7",
    )


def tv(quantity: int = 3) -> Product:
    return make_product("3", "TV", "5000", quantity, weight="10")


def scratch_card(quantity: int = 100) -> Product:
    return make_product("4", "Scratch Card", "50", quantity)
