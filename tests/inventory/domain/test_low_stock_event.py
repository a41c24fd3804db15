"""Tests for the LowStockDetected event structure."""

from datetime import UTC, datetime

from inventory.stock.events import LowStockDetected


class TestLowStockDetectedEvent:
    def test_fields(self):
        now = datetime.now(UTC)
        event = LowStockDetected(
            record_id="rec-001",
            name="Chlorine tablets",
            quantity_on_hand=3,
            threshold=5,
            detected_at=now,
        )
        assert event.record_id == "rec-001"
        assert event.name == "Chlorine tablets"
        assert event.quantity_on_hand == 3
        assert event.threshold == 5
        assert event.detected_at == now

    def test_schema_version_is_a_positive_integer(self):
        assert LowStockDetected.__version__ == 1
