"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class CartLineDTO:
    product_name: str
    quantity: int


@dataclass(frozen=True)
class CartDTO:
    id: int
    customer_id: int
    status: str
    lines: list[CartLineDTO]


@dataclass(frozen=True)
class ShipmentItemDTO:
    name: str
    weight_grams: str  # formatted, e.g. "200"


@dataclass(frozen=True)
class ShipmentDTO:
    items: list[ShipmentItemDTO]
    total_weight_kg: str  # one decimal, e.g. "31.4"


@dataclass(frozen=True)
class ReceiptLineDTO:
    quantity: int
    product_name: str
    line_total: str


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a completed checkout as displayed to the user."""

    lines: list[ReceiptLineDTO]
    subtotal: str
    shipping: str
    total: str
    balance_after: str
    shipment: ShipmentDTO | None
