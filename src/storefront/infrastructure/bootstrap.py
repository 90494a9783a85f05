"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from storefront.application.add_product import AddProductHandler
from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import CheckoutHandler
from storefront.application.open_cart import OpenCartHandler
from storefront.application.register_customer import RegisterCustomerHandler
from storefront.application.show_inventory import ShowInventoryHandler
from storefront.domain.model.product import NonPerishable, Perishable
from storefront.domain.model.value_objects import Weight
from storefront.domain.repository.shipment_notifier import ShipmentNotifier
from storefront.domain.service.checkout_service import CheckoutService
from storefront.domain.service.shipping_service import ShippingService
from storefront.infrastructure.persistence.in_memory import (
    InMemoryCartRepository,
    InMemoryCustomerRepository,
    InMemoryInventoryRepository,
    InMemoryProductRepository,
)
from storefront.infrastructure.settings import Settings
from storefront.infrastructure.shipping.console_notifier import ConsoleShipmentNotifier


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Storefront:
    """Repositories and collaborators shared by one run of the store."""

    settings: Settings
    notifier: ShipmentNotifier
    clock: Callable[[], datetime] = _utc_now
    products: InMemoryProductRepository = field(default_factory=InMemoryProductRepository)
    inventory: InMemoryInventoryRepository = field(default_factory=InMemoryInventoryRepository)
    carts: InMemoryCartRepository = field(default_factory=InMemoryCartRepository)
    customers: InMemoryCustomerRepository = field(default_factory=InMemoryCustomerRepository)

    # --- Handlers -------------------------------------------------------------

    def add_product(self) -> AddProductHandler:
        return AddProductHandler(self.products, self.inventory)

    def show_inventory(self) -> ShowInventoryHandler:
        return ShowInventoryHandler(self.inventory, self.products, clock=self.clock)

    def register_customer(self) -> RegisterCustomerHandler:
        return RegisterCustomerHandler(self.customers)

    def open_cart(self) -> OpenCartHandler:
        return OpenCartHandler(self.carts, self.customers)

    def add_to_cart(self) -> AddToCartHandler:
        return AddToCartHandler(self.carts, self.products, self.inventory, clock=self.clock)

    def checkout(self) -> CheckoutHandler:
        service = CheckoutService(
            product_repo=self.products,
            inventory_repo=self.inventory,
            shipping=ShippingService(self.notifier),
            shipping_fee=self.settings.shipping_fee,
            clock=self.clock,
        )
        return CheckoutHandler(self.carts, self.customers, service)


def build_storefront(
    settings: Settings,
    notifier: ShipmentNotifier | None = None,
    clock: Callable[[], datetime] = _utc_now,
) -> Storefront:
    return Storefront(
        settings=settings,
        notifier=notifier if notifier is not None else ConsoleShipmentNotifier(),
        clock=clock,
    )


def seed_demo_catalog(store: Storefront) -> None:
    """Stock the store with the fixed demo catalog.

    The perishables expire one day after the store's current time.
    """
    tomorrow = store.clock() + timedelta(days=1)
    catalog = [
        ("Cheese", "100", Perishable(weight=Weight.of("0.2"), expires_at=tomorrow), 5),
        ("Biscuits", "150", Perishable(weight=Weight.of("0.7"), expires_at=tomorrow), 3),
        ("TV", "200", NonPerishable(weight=Weight.of("10"), requires_shipping=True), 3),
        ("ScratchCard", "50", NonPerishable(weight=Weight.zero(), requires_shipping=False), 10),
    ]

    add_product = store.add_product()
    for name, price, variant, stock in catalog:
        add_product.handle(name=name, price=price, variant=variant, stock=stock)
