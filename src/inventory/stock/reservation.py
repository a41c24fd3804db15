"""Stock reservation — commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer

from inventory.domain import inventory
from inventory.stock.keeper import default_keeper
from inventory.stock.stock import StockRecord


@inventory.command(part_of="StockRecord")
class ReserveStock:
    """Hold stock for a pending order."""

    record_id = Identifier(required=True)
    quantity = Integer(required=True)


@inventory.command(part_of="StockRecord")
class ReleaseStock:
    """Give back stock held for a cancelled or expired order."""

    record_id = Identifier(required=True)
    quantity = Integer(required=True)


@inventory.command_handler(part_of=StockRecord)
class ReservationHandler:
    @handle(ReserveStock)
    def reserve_stock(self, command):
        record, _ = default_keeper().reserve(command.record_id, command.quantity)
        return record.version

    @handle(ReleaseStock)
    def release_stock(self, command):
        record = default_keeper().release(command.record_id, command.quantity)
        return record.version
