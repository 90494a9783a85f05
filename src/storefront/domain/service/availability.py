"""Availability rules shared by the cart and checkout.

Pure functions over a product, a stock level and a point in time.
"""

from __future__ import annotations

from datetime import datetime

from storefront.domain.model.product import Perishable, Product


def is_expired(product: Product, at: datetime) -> bool:
    """Perishables expire once *at* is past their expiry; others never do."""
    variant = product.variant
    if isinstance(variant, Perishable):
        return at > variant.expires_at
    return False


def is_available(product: Product, stock: int, requested: int, at: datetime) -> bool:
    """True iff *requested* units can be sold from *stock* at time *at*."""
    return requested <= stock and not is_expired(product, at)
