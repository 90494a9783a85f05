"""Application service: Add To Cart use case.

Resolves the product, checks it can be sold right now and appends a line
to the cart. Stock is not reserved here; checkout validates it again.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

import structlog

from storefront.application.dto import CartDTO, CartItemSpec, CartLineDTO
from storefront.domain.exceptions import EntityNotFoundError, InvalidOperationError
from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.inventory_repository import InventoryRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.availability import is_available

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._inventory_repo = inventory_repo
        self._clock = clock

    def handle(self, cart_id: int, spec: CartItemSpec) -> CartDTO:
        cart = self._cart_repo.get_by_id(cart_id)
        if cart is None:
            raise EntityNotFoundError(f"Cart #{cart_id} not found")

        product = self._product_repo.get_by_name(spec.product_name)
        if product is None:
            raise EntityNotFoundError(f"Product not found: '{spec.product_name}'")

        quantity = Quantity(spec.quantity)

        inv = self._inventory_repo.get_by_product_id(product.id)
        on_hand = inv.quantity_on_hand if inv is not None else 0
        if not is_available(product, on_hand, quantity.value, self._clock()):
            raise InvalidOperationError(
                f"{product.name} is unavailable or expired"
            )

        cart.add(
            CartLine(product_id=product.id, product_name=product.name, quantity=quantity)
        )
        self._cart_repo.save(cart)

        logger.info(
            "cart_item_added",
            cart_id=cart.id,
            product=product.name,
            quantity=quantity.value,
        )
        return self._to_dto(cart)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(cart: Cart) -> CartDTO:
        return CartDTO(
            id=cart.id,  # type: ignore[arg-type]
            customer_id=cart.customer_id,
            status=cart.status.value,
            lines=[
                CartLineDTO(product_name=line.product_name, quantity=line.quantity.value)
                for line in cart.lines
            ],
        )
