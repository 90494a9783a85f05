"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from storefront.domain.model.product import Perishable
from storefront.domain.repository.inventory_repository import InventoryRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.availability import is_expired


@dataclass(frozen=True)
class InventoryLineDTO:
    product_name: str
    price: str
    on_hand: int
    expires_at: str | None
    expired: bool


class ShowInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._inventory_repo = inventory_repo
        self._product_repo = product_repo
        self._clock = clock

    def handle(self) -> list[InventoryLineDTO]:
        now = self._clock()
        lines: list[InventoryLineDTO] = []
        for product in self._product_repo.list_all():
            inv = self._inventory_repo.get_by_product_id(product.id)
            expires_at = None
            if isinstance(product.variant, Perishable):
                expires_at = (
                    product.variant.expires_at.astimezone(timezone.utc)
                    .strftime("%Y-%m-%d %H:%M UTC")
                )
            lines.append(
                InventoryLineDTO(
                    product_name=product.name,
                    price=str(product.price),
                    on_hand=inv.quantity_on_hand if inv is not None else 0,
                    expires_at=expires_at,
                    expired=is_expired(product, now),
                )
            )
        return lines
