"""Application service: Register Customer use case."""

from __future__ import annotations

from storefront.domain.model.customer import Customer
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.customer_repository import CustomerRepository


class RegisterCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str, balance: str) -> Customer:
        customer = Customer.create(name=name, balance=Money.of(balance))
        self._customer_repo.save(customer)
        return customer
