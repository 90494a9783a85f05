"""Product aggregate.

Products live independently of carts. A product is one of two variants:
perishable goods carry an expiry timestamp, non-perishable goods carry a
flag saying whether they need physical shipment. The variant is plain data;
behaviour that depends on it lives in ``storefront.domain.service.availability``
and in ``shippable_view`` below.

Stock is not part of the product. Quantities on hand are tracked per product
id by ``InventoryItem``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.shipment import ShippableView
from storefront.domain.model.value_objects import Money, Weight


@dataclass(frozen=True)
class Perishable:
    """Goods that expire. Always physical, so always shipped."""

    weight: Weight
    expires_at: datetime

    def __post_init__(self) -> None:
        if self.expires_at.tzinfo is None:
            raise ValidationError("Expiry timestamp must be timezone-aware")


@dataclass(frozen=True)
class NonPerishable:
    """Goods that never expire (TVs, scratch cards, ...)."""

    weight: Weight
    requires_shipping: bool


ProductVariant = Union[Perishable, NonPerishable]


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. Stock lives in its InventoryItem.
    """

    id: str
    name: str
    price: Money
    variant: ProductVariant


def shippable_view(product: Product) -> ShippableView | None:
    """Project a product onto what the shipping step needs to know.

    Perishables always ship; non-perishables ship only when flagged.
    """
    variant = product.variant
    if isinstance(variant, Perishable):
        return ShippableView(name=product.name, weight=variant.weight)
    if variant.requires_shipping:
        return ShippableView(name=product.name, weight=variant.weight)
    return None
