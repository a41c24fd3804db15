"""Stock alert sink port — where LowStockDetected events are forwarded."""

from abc import ABC, abstractmethod

from inventory.stock.events import LowStockDetected


class StockAlertSink(ABC):
    """Abstract consumer of low-stock alerts.

    Delivery guarantees (retries, deduplication) belong to the adapter.
    """

    @abstractmethod
    def publish(self, event: LowStockDetected) -> None:
        """Hand one alert over to the consumer."""
        ...
