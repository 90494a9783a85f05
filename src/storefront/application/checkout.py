"""Application service: Checkout use case.

Loads the cart and its customer, delegates the actual checkout to the
domain service and persists the outcome.
"""

from __future__ import annotations

from storefront.application.dto import (
    ReceiptDTO,
    ReceiptLineDTO,
    ShipmentDTO,
    ShipmentItemDTO,
)
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.receipt import Receipt
from storefront.domain.model.shipment import ShipmentNotice
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.service.checkout_service import CheckoutService


class CheckoutHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        customer_repo: CustomerRepository,
        checkout_service: CheckoutService,
    ) -> None:
        self._cart_repo = cart_repo
        self._customer_repo = customer_repo
        self._checkout_service = checkout_service

    def handle(self, cart_id: int) -> ReceiptDTO:
        cart = self._cart_repo.get_by_id(cart_id)
        if cart is None:
            raise EntityNotFoundError(f"Cart #{cart_id} not found")

        customer = self._customer_repo.get_by_id(cart.customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer #{cart.customer_id} not found")

        receipt = self._checkout_service.checkout(cart, customer)

        self._customer_repo.save(customer)
        self._cart_repo.save(cart)

        return self._to_dto(receipt)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(receipt: Receipt) -> ReceiptDTO:
        return ReceiptDTO(
            lines=[
                ReceiptLineDTO(
                    quantity=line.quantity,
                    product_name=line.product_name,
                    line_total=str(line.line_total),
                )
                for line in receipt.lines
            ],
            subtotal=str(receipt.subtotal),
            shipping=str(receipt.shipping_fee),
            total=str(receipt.total),
            balance_after=str(receipt.balance_after),
            shipment=(
                shipment_to_dto(receipt.shipment)
                if receipt.shipment is not None
                else None
            ),
        )


def shipment_to_dto(notice: ShipmentNotice) -> ShipmentDTO:
    return ShipmentDTO(
        items=[
            ShipmentItemDTO(name=item.name, weight_grams=f"{item.weight.grams:.0f}")
            for item in notice.items
        ],
        total_weight_kg=f"{notice.total_weight.kg:.1f}",
    )
