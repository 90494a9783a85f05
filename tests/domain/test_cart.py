"""Unit tests for the Cart aggregate."""

import pytest

from storefront.domain.exceptions import InvalidOperationError
from storefront.domain.model.cart import Cart, CartLine, CartStatus
from storefront.domain.model.value_objects import Quantity


def _line(product_id="1", name="Cheese", qty=1):
    return CartLine(product_id=product_id, product_name=name, quantity=Quantity(qty))


class TestCart:

    def test_new_cart_is_empty_and_open(self):
        cart = Cart(id=1, customer_id=1)
        assert cart.is_empty
        assert cart.status == CartStatus.OPEN

    def test_add_keeps_insertion_order(self):
        cart = Cart(id=1, customer_id=1)
        cart.add(_line("3", "TV"))
        cart.add(_line("1", "Cheese"))
        assert [line.product_name for line in cart.lines] == ["TV", "Cheese"]
        assert not cart.is_empty

    def test_duplicate_products_are_not_merged(self):
        cart = Cart(id=1, customer_id=1)
        cart.add(_line(qty=2))
        cart.add(_line(qty=3))
        assert [line.quantity.value for line in cart.lines] == [2, 3]

    def test_checked_out_cart_rejects_new_lines(self):
        cart = Cart(id=1, customer_id=1)
        cart.add(_line())
        cart.mark_checked_out()
        with pytest.raises(InvalidOperationError, match="already checked out"):
            cart.add(_line())

    def test_cannot_check_out_twice(self):
        cart = Cart(id=1, customer_id=1)
        cart.mark_checked_out()
        with pytest.raises(InvalidOperationError, match="already checked out"):
            cart.mark_checked_out()
