"""Shipping value objects.

``ShippableView`` is the read-only projection of a product the shipping step
works with. It is built on demand at checkout and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.value_objects import Weight


@dataclass(frozen=True)
class ShippableView:
    name: str
    weight: Weight


@dataclass(frozen=True)
class ShipmentNotice:
    """The manifest handed to the shipment notifier."""

    items: tuple[ShippableView, ...]

    @property
    def total_weight(self) -> Weight:
        total = Weight.zero()
        for item in self.items:
            total = total + item.weight
        return total
