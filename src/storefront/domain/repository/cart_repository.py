"""Abstract repository for Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_id(self, cart_id: int) -> Cart | None:
        """Return a cart by its ID, or None if not found."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Store a new or updated cart, assigning an ID to new ones."""
