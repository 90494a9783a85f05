"""Application service: Add Product use case.

Lists a product in the catalog together with its opening stock, so every
product has an inventory record from the start.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.inventory import InventoryItem
from storefront.domain.model.product import Product, ProductVariant
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.inventory_repository import InventoryRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._inventory_repo = inventory_repo

    def handle(
        self,
        name: str,
        price: str,
        variant: ProductVariant,
        stock: int = 0,
    ) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        name = name.strip()

        if self._product_repo.get_by_name(name) is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Validate everything before touching either repository
        product_id = str(len(self._product_repo.list_all()) + 1)
        product = Product(id=product_id, name=name, price=Money.of(price), variant=variant)
        inventory = InventoryItem(
            product_id=product_id, product_name=name, quantity_on_hand=stock
        )

        self._product_repo.save(product)
        self._inventory_repo.save(inventory)

        logger.debug("product_added", product_id=product_id, name=name, stock=stock)
        return product
