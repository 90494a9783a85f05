"""InventoryItem aggregate: tracks stock per product.

Each product has one InventoryItem that knows how many units are on hand.
Cart lines and checkout refer to stock through the product id.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import ValidationError


@dataclass
class InventoryItem:
    """Aggregate root for inventory tracking.

    Invariants:
    - ``quantity_on_hand`` is always >= 0
    """

    product_id: str
    product_name: str
    quantity_on_hand: int

    def __post_init__(self) -> None:
        if self.quantity_on_hand < 0:
            raise ValidationError(
                f"Stock for {self.product_name} cannot be negative"
            )

    def deduct(self, quantity: int) -> None:
        """Permanently remove sold units from stock.

        Callers validate availability first; this only guards the invariant.
        """
        if quantity <= 0:
            raise ValidationError("Deduct quantity must be positive")
        if quantity > self.quantity_on_hand:
            raise ValidationError(
                f"Cannot deduct {quantity} of {self.product_name} "
                f"(only {self.quantity_on_hand} on hand)"
            )
        self.quantity_on_hand -= quantity
