"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity, Weight


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_factory_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    @pytest.mark.parametrize("raw", ["nan", "NaN", "sNaN", "inf", "-Infinity"])
    def test_non_finite_amount_rejected(self, raw):
        with pytest.raises(ValidationError, match="must be finite"):
            Money.of(raw)

    def test_zero(self):
        assert Money.zero() == Money.of("0")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction(self):
        assert Money.of("10") - Money.of("3") == Money.of("7")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_str_formatting(self):
        assert str(Money.of("1030")) == "1030.00"
        assert str(Money.of("9.5")) == "9.50"

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"


# ── Weight ───────────────────────────────────────────────────────────────────


class TestWeight:

    def test_grams(self):
        assert Weight.of("0.2").grams == Decimal("200")

    def test_addition(self):
        assert Weight.of("0.2") + Weight.of("0.7") == Weight.of("0.9")

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Weight.of("-1")

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="must be finite"):
            Weight.of("Infinity")

    def test_str_has_one_decimal(self):
        assert str(Weight.of("10.25")) == "10.2 kg"
