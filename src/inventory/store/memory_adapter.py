"""In-memory stock store for development and testing.

Records are kept in a dict guarded by a single lock, which makes the
version check and the write one atomic step even when many threads share
the store. The store holds its own copies: a record handed to ``save`` or
returned by ``load`` can be changed by the caller without touching what is
stored, so every change has to go through the version check.
"""

import threading

from inventory.stock.errors import NotFound, VersionConflict
from inventory.stock.stock import StockRecord
from inventory.store.port import StockStore


class MemoryStockStore(StockStore):
    """Thread-safe dict-backed store."""

    def __init__(self) -> None:
        self._records: dict[str, StockRecord] = {}
        self._lock = threading.Lock()
        self.saves: int = 0

    def load(self, record_id: str) -> StockRecord:
        with self._lock:
            record = self._records.get(str(record_id))
        if record is None:
            raise NotFound({"_entity": f"StockRecord {record_id} not found"})
        return record.snapshot()

    def save(self, record: StockRecord, expected_version: int | None) -> None:
        key = str(record.id)
        copy = record.snapshot()
        with self._lock:
            stored = self._records.get(key)
            stored_version = stored.version if stored is not None else None
            if stored_version != expected_version:
                raise VersionConflict(
                    {"version": [f"StockRecord {key} is at version {stored_version}, expected {expected_version}"]}
                )
            self._records[key] = copy
            self.saves += 1

    def list_for_owner(self, owner_id: str) -> list[StockRecord]:
        with self._lock:
            records = [r for r in self._records.values() if str(r.owner_id) == str(owner_id)]
        return [r.snapshot() for r in sorted(records, key=lambda r: r.audit.created_at)]

    def reset(self) -> None:
        """Forget every record (useful between tests)."""
        with self._lock:
            self._records.clear()
            self.saves = 0
