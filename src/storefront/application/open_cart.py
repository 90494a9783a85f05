"""Application service: Open Cart use case."""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import Cart
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.customer_repository import CustomerRepository


class OpenCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._customer_repo = customer_repo

    def handle(self, customer_id: int) -> int:
        """Open an empty cart for an existing customer; return its ID."""
        if self._customer_repo.get_by_id(customer_id) is None:
            raise EntityNotFoundError(f"Customer #{customer_id} not found")

        cart = Cart(id=None, customer_id=customer_id)
        self._cart_repo.save(cart)
        return cart.id  # type: ignore[return-value]
