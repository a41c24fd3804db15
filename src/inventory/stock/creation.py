"""Stock record creation — command and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String

from inventory.domain import inventory
from inventory.shared.money import Money
from inventory.stock.keeper import default_keeper
from inventory.stock.stock import StockRecord


@inventory.command(part_of="StockRecord")
class CreateStockRecord:
    """Start tracking stock for a new SKU."""

    owner_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    unit_price_amount = Integer(required=True)  # minor units
    currency = String(max_length=3, default="USD")
    initial_quantity = Integer(default=0)
    threshold = Integer(default=0)


@inventory.command_handler(part_of=StockRecord)
class CreateStockRecordHandler:
    @handle(CreateStockRecord)
    def create_stock_record(self, command):
        record = default_keeper().create(
            owner_id=command.owner_id,
            name=command.name,
            unit_price=Money(amount=command.unit_price_amount, currency=command.currency or "USD"),
            initial_quantity=command.initial_quantity or 0,
            threshold=command.threshold or 0,
        )
        return str(record.id)
