"""Shared BDD fixtures and step definitions for stock records."""

import pytest
from inventory.alerts import get_sink
from inventory.shared.money import Money
from inventory.stock import errors
from inventory.stock.keeper import StockKeeper
from inventory.store import get_store
from pytest_bdd import given, parsers, then


@pytest.fixture()
def keeper():
    return StockKeeper(get_store(), get_sink())


@pytest.fixture()
def outcome():
    """Holds the error raised by the last When step, if any."""
    return {"error": None}


@given(
    parsers.cfparse("a stock record with {on_hand:d} on hand and a threshold of {threshold:d}"),
    target_fixture="record_id",
)
def _(keeper, on_hand, threshold):
    record = keeper.create(
        owner_id="owner-001",
        name="Chlorine tablets",
        unit_price=Money(amount=550),
        initial_quantity=on_hand,
        threshold=threshold,
    )
    return record.id


@given(parsers.cfparse("{quantity:d} units were reserved"))
def _(keeper, record_id, quantity):
    keeper.reserve(record_id, quantity)


@then(parsers.cfparse("the reserved quantity is {quantity:d}"))
def _(keeper, record_id, quantity):
    assert get_store().load(record_id).reserved_quantity == quantity


@then(parsers.cfparse("the on-hand quantity is {quantity:d}"))
def _(record_id, quantity):
    assert get_store().load(record_id).quantity_on_hand == quantity


@then("no low-stock alert was published")
def _():
    assert get_sink().published == []


@then(parsers.cfparse("a low-stock alert reporting {quantity:d} on hand was published"))
def _(quantity):
    published = get_sink().published
    assert len(published) == 1
    assert published[0].quantity_on_hand == quantity


@then(parsers.cfparse("the request fails with {error_name}"))
def _(outcome, error_name):
    assert isinstance(outcome["error"], getattr(errors, error_name))
