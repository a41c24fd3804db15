"""Money value object for prices held in integer minor units."""

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Integer, String

from inventory.domain import inventory

VALID_CURRENCIES = frozenset(
    {
        "USD",
        "EUR",
        "GBP",
        "JPY",
        "CAD",
        "AUD",
        "CHF",
        "CNY",
        "INR",
        "MXN",
        "BRL",
        "KRW",
        "SGD",
        "HKD",
        "NOK",
        "SEK",
        "DKK",
        "NZD",
        "ZAR",
        "TWD",
        "PEN",
    }
)


@inventory.value_object
class Money:
    """A non-negative amount in the currency's smallest unit (cents for USD)."""

    amount = Integer(required=True, min_value=0)
    currency = String(max_length=3, default="USD")

    @invariant.post
    def currency_must_be_valid_iso_4217(self):
        if self.currency not in VALID_CURRENCIES:
            raise ValidationError({"currency": [f"Unsupported currency: {self.currency}"]})
