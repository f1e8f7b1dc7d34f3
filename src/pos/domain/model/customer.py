"""Customer entity: the paying party of a checkout."""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import InsufficientFundsError
from pos.domain.model.value_objects import Money


@dataclass
class Customer:

    name: str
    balance: Money

    def can_afford(self, amount: Money) -> bool:
        return self.balance >= amount

    def pay(self, amount: Money) -> None:
        """Deduct *amount* from the balance."""
        if not self.can_afford(amount):
            raise InsufficientFundsError(self.balance.amount, amount.amount)
        self.balance = self.balance - amount
