"""Recording alert sink — keeps published alerts in memory for assertions."""

import threading

from inventory.alerts.port import StockAlertSink
from inventory.stock.events import LowStockDetected


class RecordingAlertSink(StockAlertSink):
    def __init__(self) -> None:
        self.published: list[LowStockDetected] = []
        self._lock = threading.Lock()

    def publish(self, event: LowStockDetected) -> None:
        with self._lock:
            self.published.append(event)

    def reset(self) -> None:
        """Clear published alerts (useful between tests)."""
        with self._lock:
            self.published.clear()
