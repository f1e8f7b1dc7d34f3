"""Product aggregate.

Products live in the catalog, independently of any cart.  Expiry and
shipping are optional facets rather than subclasses: a product can carry
either, both, or neither, and callers test for a facet instead of
inspecting the product's type.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money, Weight


@dataclass(frozen=True)
class ExpiryFacet:
    expires_at: datetime

    def __post_init__(self) -> None:
        if self.expires_at.tzinfo is None:
            raise ValidationError(
                f"Expiry must be timezone-aware, got naive {self.expires_at.isoformat()}"
            )


@dataclass(frozen=True)
class ShippingFacet:
    weight: Weight


@dataclass
class Product:
    """A product in the catalog.

    ``quantity`` is the stock on hand.  It is only decremented by a
    successful checkout, which validates the bounds beforehand.
    """

    id: str
    name: str
    price: Money
    quantity: int
    expiry: ExpiryFacet | None = None
    shipping: ShippingFacet | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.quantity < 0:
            raise ValidationError(
                f"Stock for {self.name} cannot be negative, got {self.quantity}"
            )

    # --- Facets ---------------------------------------------------------------

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expiry is None:
            return False
        if now is None:
            now = datetime.now(timezone.utc)
        return now > self.expiry.expires_at

    def is_shippable(self) -> bool:
        return self.shipping is not None

    @property
    def weight(self) -> Weight:
        """Unit weight.  Only defined for shippable products."""
        if self.shipping is None:
            raise ValidationError(f"{self.name} is not shippable and has no weight")
        return self.shipping.weight

    # --- Mutations ------------------------------------------------------------

    def reduce_quantity(self, amount: int) -> None:
        """Take *amount* units out of stock.

        No bounds check against the stock on hand: the checkout service
        validates every line before settling.
        """
        if amount <= 0:
            raise ValidationError("Reduction amount must be positive")
        self.quantity -= amount
