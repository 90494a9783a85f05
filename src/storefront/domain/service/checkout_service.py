"""Domain service: Checkout.

Coordinates the cross-aggregate checkout of a cart: products, inventory,
the customer and shipping.

The two-phase approach (validate-then-mutate) ensures a failed checkout
never leaves stock deducted or the customer charged:

  Phase 1 - load and validate every line, price it and collect what has to
            ship. Fails fast before any mutation.
  Phase 2 - ship, charge the customer, deduct stock and close the cart.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal

import structlog

from storefront.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    InsufficientFundsError,
    InvalidOperationError,
    ProductUnavailableError,
)
from storefront.domain.model.cart import Cart, CartStatus
from storefront.domain.model.customer import Customer
from storefront.domain.model.inventory import InventoryItem
from storefront.domain.model.product import shippable_view
from storefront.domain.model.receipt import Receipt, ReceiptLine
from storefront.domain.model.shipment import ShipmentNotice, ShippableView
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.inventory_repository import InventoryRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.service.availability import is_available
from storefront.domain.service.shipping_service import ShippingService

logger = structlog.get_logger(__name__)

# Charged once per checkout when at least one item ships, regardless of
# weight or item count.
FLAT_SHIPPING_FEE = Money(Decimal("30"))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckoutService:

    def __init__(
        self,
        product_repo: ProductRepository,
        inventory_repo: InventoryRepository,
        shipping: ShippingService,
        shipping_fee: Money = FLAT_SHIPPING_FEE,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._inventory_repo = inventory_repo
        self._shipping = shipping
        self._shipping_fee = shipping_fee
        self._clock = clock

    def checkout(self, cart: Cart, customer: Customer) -> Receipt:
        """Check out *cart* for *customer* and return the receipt.

        Raises InvalidOperationError, EmptyCartError, ProductUnavailableError
        or InsufficientFundsError; in every failure case nothing is mutated.
        """
        if cart.status != CartStatus.OPEN:
            raise InvalidOperationError(f"Cart #{cart.id} is already checked out")
        if cart.is_empty:
            raise EmptyCartError("Cart is empty")

        now = self._clock()

        # Phase 1: validate and price every line
        claimed: dict[str, int] = {}
        stock: dict[str, InventoryItem] = {}
        receipt_lines: list[ReceiptLine] = []
        to_ship: list[ShippableView] = []
        subtotal = Money.zero()

        for line in cart.lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                raise EntityNotFoundError(
                    f"Product '{line.product_name}' no longer exists"
                )
            inv = stock.get(line.product_id)
            if inv is None:
                inv = self._inventory_repo.get_by_product_id(line.product_id)
                if inv is None:
                    raise EntityNotFoundError(
                        f"No inventory record for product '{product.name}'"
                    )
                stock[line.product_id] = inv

            qty = line.quantity.value
            # Earlier lines for the same product already claimed part of the stock
            remaining = inv.quantity_on_hand - claimed.get(line.product_id, 0)
            if not is_available(product, remaining, qty, now):
                logger.warning(
                    "checkout_rejected",
                    reason="product_unavailable",
                    cart_id=cart.id,
                    product=product.name,
                    requested=qty,
                    remaining=remaining,
                )
                raise ProductUnavailableError(
                    f"{product.name} is unavailable or expired "
                    f"(need {qty}, {remaining} left)"
                )
            claimed[line.product_id] = claimed.get(line.product_id, 0) + qty

            line_total = product.price * qty
            subtotal = subtotal + line_total
            receipt_lines.append(
                ReceiptLine(quantity=qty, product_name=product.name, line_total=line_total)
            )

            view = shippable_view(product)
            if view is not None:
                to_ship.append(view)

        shipping_fee = self._shipping_fee if to_ship else Money.zero()
        total = subtotal + shipping_fee

        if not customer.can_afford(total):
            logger.warning(
                "checkout_rejected",
                reason="insufficient_funds",
                cart_id=cart.id,
                total=str(total),
                balance=str(customer.balance),
            )
            raise InsufficientFundsError(
                f"Insufficient balance: {total} due, {customer.balance} available"
            )

        # Phase 2: commit
        shipment: ShipmentNotice | None = None
        if to_ship:
            shipment = self._shipping.ship(to_ship)

        customer.pay(total)

        for product_id, qty in claimed.items():
            inv = stock[product_id]
            inv.deduct(qty)
            self._inventory_repo.save(inv)

        cart.mark_checked_out()

        logger.info(
            "checkout_completed",
            cart_id=cart.id,
            customer_id=customer.id,
            subtotal=str(subtotal),
            shipping_fee=str(shipping_fee),
            total=str(total),
        )

        return Receipt(
            lines=tuple(receipt_lines),
            subtotal=subtotal,
            shipping_fee=shipping_fee,
            total=total,
            balance_after=customer.balance,
            shipment=shipment,
        )
