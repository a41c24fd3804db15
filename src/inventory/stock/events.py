"""Domain events for the StockRecord aggregate.

Events are returned by the operation that produced them and forwarded to the
alert sink by the keeper once the new state has been saved.
"""

from protean.fields import DateTime, Identifier, Integer, String

from inventory.domain import inventory


@inventory.event(part_of="StockRecord")
class LowStockDetected:
    """Stock fell to or below the record's threshold."""

    __version__ = 1

    record_id = Identifier(required=True)
    name = String(required=True)
    quantity_on_hand = Integer(required=True)
    threshold = Integer(required=True)
    detected_at = DateTime(required=True)
