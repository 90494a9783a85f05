"""Customer aggregate: a name and a spendable balance."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import InsufficientFundsError, ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class Customer:
    """Aggregate root for paying customers.

    Invariant: the balance only ever decreases through a successful ``pay``.
    """

    id: int | None
    name: str
    balance: Money

    @staticmethod
    def create(name: str, balance: Money) -> Customer:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        return Customer(id=None, name=name.strip(), balance=balance)

    def can_afford(self, amount: Money) -> bool:
        return amount <= self.balance

    def pay(self, amount: Money) -> None:
        """Debit *amount* from the balance, all or nothing."""
        if amount > self.balance:
            raise InsufficientFundsError(
                f"Insufficient balance: {amount} due, {self.balance} available"
            )
        self.balance = self.balance - amount
