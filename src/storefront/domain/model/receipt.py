"""Receipt: the result of a successful checkout."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.shipment import ShipmentNotice
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class ReceiptLine:
    quantity: int
    product_name: str
    line_total: Money


@dataclass(frozen=True)
class Receipt:
    lines: tuple[ReceiptLine, ...]
    subtotal: Money
    shipping_fee: Money
    total: Money
    balance_after: Money
    shipment: ShipmentNotice | None = None
