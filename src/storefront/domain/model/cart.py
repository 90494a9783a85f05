"""Cart aggregate: the lines a customer intends to buy.

Lines point at products by id. The cart never copies stock or price, so
checkout always works against the current catalog and inventory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import InvalidOperationError
from storefront.domain.model.value_objects import Quantity


class CartStatus(Enum):
    OPEN = "OPEN"
    CHECKED_OUT = "CHECKED_OUT"


@dataclass(frozen=True)
class CartLine:
    product_id: str
    product_name: str
    quantity: Quantity


@dataclass
class Cart:
    """Append-only within its lifetime: no remove or update of lines.

    Duplicate products are kept as separate lines; insertion order is the
    receipt order.
    """

    id: int | None
    customer_id: int
    lines: list[CartLine] = field(default_factory=list)
    status: CartStatus = CartStatus.OPEN
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def add(self, line: CartLine) -> None:
        """Append a line. Availability is checked by the caller."""
        self._assert_open()
        self.lines.append(line)

    def mark_checked_out(self) -> None:
        self._assert_open()
        self.status = CartStatus.CHECKED_OUT

    def _assert_open(self) -> None:
        if self.status != CartStatus.OPEN:
            raise InvalidOperationError(
                f"Cart #{self.id} is already checked out"
            )
