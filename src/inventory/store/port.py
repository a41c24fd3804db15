"""Stock store port (abstract interface).

The contract every persistence adapter must honour: load a record by id and
save a record only if the stored version still matches the one the caller
read. The check and the write must happen atomically.
"""

from abc import ABC, abstractmethod

from inventory.stock.stock import StockRecord


class StockStore(ABC):
    """Abstract stock record store with optimistic version checks."""

    @abstractmethod
    def load(self, record_id: str) -> StockRecord:
        """Return the latest stored record.

        Raises:
            NotFound: no record is stored under ``record_id``.
        """
        ...

    @abstractmethod
    def save(self, record: StockRecord, expected_version: int | None) -> None:
        """Store ``record`` if the stored version equals ``expected_version``.

        ``expected_version=None`` means the record must not exist yet.

        Raises:
            VersionConflict: the stored version differs from ``expected_version``.
        """
        ...

    @abstractmethod
    def list_for_owner(self, owner_id: str) -> list[StockRecord]:
        """All records belonging to an account, oldest first."""
        ...
