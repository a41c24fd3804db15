"""Stock store registry.

Provides get_store() / set_store() to swap persistence adapters. Defaults to
MemoryStockStore; a database-backed adapter is plugged in with set_store().
"""

from inventory.store.memory_adapter import MemoryStockStore
from inventory.store.port import StockStore

_current_store: StockStore | None = None


def get_store() -> StockStore:
    """Return the current stock store. Defaults to MemoryStockStore."""
    global _current_store
    if _current_store is None:
        _current_store = MemoryStockStore()
    return _current_store


def set_store(store: StockStore) -> None:
    """Override the active stock store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_store() -> None:
    """Reset to the default store."""
    global _current_store
    _current_store = None
