"""StockKeeper — runs stock operations against a store under optimistic concurrency.

Every mutation follows the same cycle:

1. Load the latest record (and its version).
2. Apply exactly one operation to get a candidate record and maybe an event.
3. Save the candidate, conditioned on the stored version being unchanged.
4. On a version conflict, reload and re-run the operation from its original
   input, since available stock may have moved. Give up with ``Conflict``
   once the retry policy is exhausted.

Alerts are published only after the save succeeded, so a losing attempt
never leaks an event.
"""

import time

from inventory.alerts import get_sink
from inventory.alerts.port import StockAlertSink
from inventory.config import RetryPolicy, load_retry_policy
from inventory.stock.errors import Conflict, VersionConflict
from inventory.stock.stock import StockRecord
from inventory.store import get_store
from inventory.store.port import StockStore
from inventory.utils.logging import get_logger

logger = get_logger(__name__)


class StockKeeper:
    def __init__(
        self,
        store: StockStore,
        sink: StockAlertSink,
        policy: RetryPolicy | None = None,
        sleep=time.sleep,
    ) -> None:
        self.store = store
        self.sink = sink
        self.policy = policy or load_retry_policy()
        self._sleep = sleep

    def create(self, owner_id, name, unit_price, initial_quantity, threshold) -> StockRecord:
        record = StockRecord.create(
            owner_id=owner_id,
            name=name,
            unit_price=unit_price,
            initial_quantity=initial_quantity,
            threshold=threshold,
        )
        self.store.save(record, expected_version=None)
        logger.info("stock_record_created", record_id=str(record.id), owner_id=str(owner_id))
        return record

    def adjust(self, record_id, delta):
        return self._mutate(record_id, "adjust", lambda record: record.adjust(delta))

    def reserve(self, record_id, quantity):
        return self._mutate(record_id, "reserve", lambda record: record.reserve(quantity))

    def release(self, record_id, quantity):
        updated, _ = self._mutate(record_id, "release", lambda record: (record.release(quantity), None))
        return updated

    def records_for_owner(self, owner_id) -> list[StockRecord]:
        return self.store.list_for_owner(owner_id)

    def _mutate(self, record_id, operation, change):
        log = logger.bind(record_id=str(record_id), operation=operation)

        for attempt in range(1, self.policy.attempts + 1):
            current = self.store.load(record_id)
            updated, event = change(current)

            try:
                self.store.save(updated, expected_version=current.version)
            except VersionConflict:
                log.info("stock_version_conflict", attempt=attempt, version=current.version)
                if attempt < self.policy.attempts:
                    self._sleep(self.policy.backoff(attempt))
                continue

            log.debug("stock_mutation_committed", attempt=attempt, version=updated.version)
            if event is not None:
                self.sink.publish(event)
            return updated, event

        log.warning("stock_retries_exhausted", attempts=self.policy.attempts)
        raise Conflict(
            {"version": [f"Gave up on {operation} for StockRecord {record_id} after {self.policy.attempts} attempts"]}
        )


def default_keeper() -> StockKeeper:
    """A keeper wired to the registered store and alert sink."""
    return StockKeeper(get_store(), get_sink())
