"""BDD tests for stock adjustment."""

from inventory.stock.errors import InsufficientStock
from pytest_bdd import parsers, scenarios, when

scenarios("features/stock_adjustment.feature")


@when(parsers.cfparse("the stock is adjusted by {delta:d}"))
def _(keeper, record_id, outcome, delta):
    try:
        keeper.adjust(record_id, delta)
    except InsufficientStock as exc:
        outcome["error"] = exc
