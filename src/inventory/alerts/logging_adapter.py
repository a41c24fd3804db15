"""Logging alert sink — writes each alert as a structured log line."""

from inventory.alerts.port import StockAlertSink
from inventory.stock.events import LowStockDetected
from inventory.utils.logging import get_logger

logger = get_logger(__name__)


class LoggingAlertSink(StockAlertSink):
    def publish(self, event: LowStockDetected) -> None:
        logger.warning(
            "low_stock_detected",
            record_id=str(event.record_id),
            name=event.name,
            quantity_on_hand=event.quantity_on_hand,
            threshold=event.threshold,
        )
