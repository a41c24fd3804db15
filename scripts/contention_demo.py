"""Demo: many callers reserving from one stock record at once.

Starts a pool of threads that each reserve a few units from the same record
through a StockKeeper. Optimistic version checks make losing writers reload
and retry; nothing is ever oversold. The summary shows how the requests
ended up and how many version conflicts were absorbed along the way.

Usage:
    python scripts/contention_demo.py --on-hand 100 --callers 40 --quantity 3

    # Fewer retries make exhausted-retry conflicts visible
    STOCK_RETRY_ATTEMPTS=2 python scripts/contention_demo.py --callers 64

    # Send low-stock alerts to the structured log instead of memory
    STOCK_ALERT_SINK=logging python scripts/contention_demo.py
"""

import argparse
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

from inventory.alerts import get_sink
from inventory.domain import inventory
from inventory.shared.money import Money
from inventory.stock.errors import Conflict, InsufficientStock, VersionConflict
from inventory.stock.keeper import StockKeeper
from inventory.store.memory_adapter import MemoryStockStore
from inventory.utils.logging import configure_logging


class CountingStore(MemoryStockStore):
    """Memory store that counts rejected saves."""

    def __init__(self):
        super().__init__()
        self.rejected = 0

    def save(self, record, expected_version):
        try:
            super().save(record, expected_version)
        except VersionConflict:
            self.rejected += 1
            raise


def main():
    parser = argparse.ArgumentParser(
        description="Hammer one stock record with concurrent reservations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--on-hand", type=int, default=100, help="Initial on-hand quantity (default: 100)")
    parser.add_argument("--threshold", type=int, default=10, help="Low-stock threshold (default: 10)")
    parser.add_argument("--callers", type=int, default=40, help="Number of concurrent reservations (default: 40)")
    parser.add_argument("--quantity", type=int, default=3, help="Units per reservation (default: 3)")
    parser.add_argument("--workers", type=int, default=16, help="Thread pool size (default: 16)")
    args = parser.parse_args()

    configure_logging()
    inventory.init()

    store = CountingStore()
    with inventory.domain_context():
        keeper = StockKeeper(store, get_sink())
        record = keeper.create(
            owner_id="demo-owner",
            name="Demo SKU",
            unit_price=Money(amount=1000),
            initial_quantity=args.on_hand,
            threshold=args.threshold,
        )

    def reserve(_):
        with inventory.domain_context():
            try:
                keeper.reserve(record.id, args.quantity)
                return "reserved"
            except InsufficientStock:
                return "insufficient"
            except Conflict:
                return "conflict"

    with ThreadPoolExecutor(max_workers=args.workers) as pool:
        outcomes = Counter(pool.map(reserve, range(args.callers)))

    with inventory.domain_context():
        final = store.load(record.id)

    print(f"Requests:          {args.callers} x {args.quantity} units")
    print(f"Reserved:          {outcomes['reserved']}")
    print(f"Insufficient:      {outcomes['insufficient']}")
    print(f"Gave up (conflict): {outcomes['conflict']}")
    print(f"Rejected saves:    {store.rejected}")
    print(f"Final state:       on_hand={final.quantity_on_hand} reserved={final.reserved_quantity} version={final.version}")


if __name__ == "__main__":
    main()
