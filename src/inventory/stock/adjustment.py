"""Stock adjustment — command and handler."""

from protean import handle
from protean.fields import Identifier, Integer

from inventory.domain import inventory
from inventory.stock.keeper import default_keeper
from inventory.stock.stock import StockRecord


@inventory.command(part_of="StockRecord")
class AdjustStock:
    """Receive stock, record shrinkage, or correct a miscount."""

    record_id = Identifier(required=True)
    delta = Integer(required=True)  # Can be negative


@inventory.command_handler(part_of=StockRecord)
class StockAdjustmentHandler:
    @handle(AdjustStock)
    def adjust_stock(self, command):
        record, _ = default_keeper().adjust(command.record_id, command.delta)
        return record.version
