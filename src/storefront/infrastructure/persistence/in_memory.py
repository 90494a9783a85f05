"""Dict-backed implementations of the domain repositories.

The store keeps no state beyond the running process; every CLI invocation
starts from the catalog the composition root seeds.
"""

from __future__ import annotations

from storefront.domain.model.cart import Cart
from storefront.domain.model.customer import Customer
from storefront.domain.model.inventory import InventoryItem
from storefront.domain.model.product import Product
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.customer_repository import CustomerRepository
from storefront.domain.repository.inventory_repository import InventoryRepository
from storefront.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class InMemoryInventoryRepository(InventoryRepository):

    def __init__(self, items: list[InventoryItem] | None = None) -> None:
        self._store: dict[str, InventoryItem] = {}
        for item in items or []:
            self._store[item.product_id] = item

    def get_by_product_id(self, product_id: str) -> InventoryItem | None:
        return self._store.get(product_id)

    def list_all(self) -> list[InventoryItem]:
        return list(self._store.values())

    def save(self, item: InventoryItem) -> None:
        self._store[item.product_id] = item


class InMemoryCartRepository(CartRepository):

    def __init__(self) -> None:
        self._store: dict[int, Cart] = {}
        self._next_id = 1

    def get_by_id(self, cart_id: int) -> Cart | None:
        return self._store.get(cart_id)

    def save(self, cart: Cart) -> None:
        if cart.id is None:
            cart.id = self._next_id
            self._next_id += 1
        self._store[cart.id] = cart


class InMemoryCustomerRepository(CustomerRepository):

    def __init__(self) -> None:
        self._store: dict[int, Customer] = {}
        self._next_id = 1

    def get_by_id(self, customer_id: int) -> Customer | None:
        return self._store.get(customer_id)

    def save(self, customer: Customer) -> None:
        if customer.id is None:
            customer.id = self._next_id
            self._next_id += 1
        self._store[customer.id] = customer
