"""Unit tests for the InventoryItem aggregate."""

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.inventory import InventoryItem


class TestInventoryItemDeduct:

    def test_deduct_reduces_stock(self):
        inv = InventoryItem(product_id="1", product_name="Cheese", quantity_on_hand=5)
        inv.deduct(2)
        assert inv.quantity_on_hand == 3

    def test_deduct_everything(self):
        inv = InventoryItem(product_id="1", product_name="Cheese", quantity_on_hand=5)
        inv.deduct(5)
        assert inv.quantity_on_hand == 0

    def test_deduct_more_than_on_hand_rejected(self):
        inv = InventoryItem(product_id="1", product_name="Cheese", quantity_on_hand=5)
        with pytest.raises(ValidationError, match="Cannot deduct 6 of Cheese"):
            inv.deduct(6)
        assert inv.quantity_on_hand == 5

    def test_deduct_zero_rejected(self):
        inv = InventoryItem(product_id="1", product_name="Cheese", quantity_on_hand=5)
        with pytest.raises(ValidationError, match="must be positive"):
            inv.deduct(0)


class TestInventoryItemCreate:

    def test_negative_initial_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            InventoryItem(product_id="1", product_name="Cheese", quantity_on_hand=-1)
