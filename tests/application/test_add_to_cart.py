"""Integration tests for the OpenCart and AddToCart use cases."""

from datetime import timedelta

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.dto import CartItemSpec
from storefront.application.open_cart import OpenCartHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InvalidOperationError,
    ValidationError,
)
from storefront.domain.model.customer import Customer
from storefront.domain.model.inventory import InventoryItem
from storefront.domain.model.value_objects import Money
from storefront.infrastructure.persistence.in_memory import (
    InMemoryCartRepository,
    InMemoryCustomerRepository,
    InMemoryInventoryRepository,
    InMemoryProductRepository,
)
from tests.fakes import NOW, demo_catalog, fixed_clock, perishable


def _setup(extra_products=(), extra_stock=()):
    products, stock = demo_catalog()
    product_repo = InMemoryProductRepository(products + list(extra_products))
    inventory_repo = InMemoryInventoryRepository(stock + list(extra_stock))
    cart_repo = InMemoryCartRepository()
    customer_repo = InMemoryCustomerRepository()
    customer = Customer.create("Alice", Money.of("1000"))
    customer_repo.save(customer)

    cart_id = OpenCartHandler(cart_repo, customer_repo).handle(customer.id)
    handler = AddToCartHandler(cart_repo, product_repo, inventory_repo, clock=fixed_clock)
    return handler, cart_id, cart_repo


class TestOpenCart:

    def test_open_cart_for_unknown_customer_rejected(self):
        handler = OpenCartHandler(InMemoryCartRepository(), InMemoryCustomerRepository())
        with pytest.raises(EntityNotFoundError, match="Customer #7 not found"):
            handler.handle(7)

    def test_carts_get_sequential_ids(self):
        customer_repo = InMemoryCustomerRepository()
        customer = Customer.create("Alice", Money.of("1"))
        customer_repo.save(customer)
        handler = OpenCartHandler(InMemoryCartRepository(), customer_repo)
        assert handler.handle(customer.id) == 1
        assert handler.handle(customer.id) == 2


class TestAddToCartHappyPath:

    def test_add_appends_line(self):
        handler, cart_id, _ = _setup()

        dto = handler.handle(cart_id, CartItemSpec("Cheese", 2))

        assert dto.id == cart_id
        assert dto.status == "OPEN"
        assert [(l.product_name, l.quantity) for l in dto.lines] == [("Cheese", 2)]

    def test_product_lookup_is_case_insensitive(self):
        handler, cart_id, _ = _setup()
        dto = handler.handle(cart_id, CartItemSpec("tv", 1))
        assert dto.lines[0].product_name == "TV"

    def test_whole_stock_can_be_added(self):
        handler, cart_id, _ = _setup()
        dto = handler.handle(cart_id, CartItemSpec("TV", 3))
        assert dto.lines[0].quantity == 3

    def test_repeated_adds_each_checked_against_live_stock(self):
        handler, cart_id, cart_repo = _setup()

        handler.handle(cart_id, CartItemSpec("TV", 2))
        handler.handle(cart_id, CartItemSpec("TV", 2))

        # Stock is only claimed at checkout, so both lines are accepted
        assert [l.quantity.value for l in cart_repo.get_by_id(cart_id).lines] == [2, 2]


class TestAddToCartValidation:

    def test_more_than_stock_rejected(self):
        handler, cart_id, cart_repo = _setup()

        with pytest.raises(InvalidOperationError, match="TV is unavailable or expired"):
            handler.handle(cart_id, CartItemSpec("TV", 4))

        assert cart_repo.get_by_id(cart_id).is_empty

    def test_expired_product_rejected_for_any_quantity(self):
        stale = perishable("9", "Milk", "20", expires_at=NOW - timedelta(days=1))
        handler, cart_id, _ = _setup(
            extra_products=[stale],
            extra_stock=[InventoryItem(product_id="9", product_name="Milk", quantity_on_hand=50)],
        )

        for qty in (1, 10, 50):
            with pytest.raises(InvalidOperationError, match="Milk is unavailable or expired"):
                handler.handle(cart_id, CartItemSpec("Milk", qty))

    def test_product_without_inventory_record_is_unavailable(self):
        handler, cart_id, _ = _setup(extra_products=[perishable("9", "Milk", "20")])
        with pytest.raises(InvalidOperationError):
            handler.handle(cart_id, CartItemSpec("Milk", 1))

    def test_unknown_product_rejected(self):
        handler, cart_id, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found: 'Laptop'"):
            handler.handle(cart_id, CartItemSpec("Laptop", 1))

    def test_unknown_cart_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Cart #42 not found"):
            handler.handle(42, CartItemSpec("TV", 1))

    def test_zero_quantity_rejected(self):
        handler, cart_id, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle(cart_id, CartItemSpec("TV", 0))
