"""Tests for the Money value object."""

import pytest
from inventory.shared.money import Money
from protean.exceptions import ValidationError


class TestMoney:
    def test_amount_in_minor_units(self):
        price = Money(amount=250, currency="EUR")
        assert price.amount == 250
        assert price.currency == "EUR"

    def test_currency_defaults_to_usd(self):
        assert Money(amount=100).currency == "USD"

    def test_zero_amount_is_allowed(self):
        assert Money(amount=0).amount == 0

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Money(amount=-1)
        assert "amount" in exc_info.value.messages

    def test_unknown_currency_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Money(amount=100, currency="XXX")
        assert "currency" in exc_info.value.messages

    def test_equal_by_value(self):
        assert Money(amount=100, currency="USD") == Money(amount=100, currency="USD")
