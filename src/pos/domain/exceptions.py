"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Checkout failures form their own closed family under CheckoutError.  They
carry the offending values as attributes so callers can branch on the kind
of failure without parsing messages.
"""

from __future__ import annotations

from decimal import Decimal


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CheckoutError(DomainException):
    """A checkout attempt (or the cart feeding it) was rejected."""


class EmptyCartError(CheckoutError):

    def __init__(self) -> None:
        super().__init__("Cart is empty.")


class ProductExpiredError(CheckoutError):

    def __init__(self, product_name: str) -> None:
        self.product_name = product_name
        super().__init__(f"{product_name} is expired.")


class InsufficientStockError(CheckoutError):

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(need {requested}, have {available} available)"
        )


class InsufficientFundsError(CheckoutError):

    def __init__(self, balance: Decimal, total: Decimal) -> None:
        self.balance = balance
        self.total = total
        super().__init__(
            f"Customer balance is insufficient "
            f"(balance {balance:.2f}, amount due {total:.2f})"
        )
