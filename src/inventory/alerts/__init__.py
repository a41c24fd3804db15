"""Alert sink registry.

Provides singleton access to the sink that receives LowStockDetected events.
STOCK_ALERT_SINK picks the default adapter: "recording" keeps alerts in
memory, "logging" writes them to the structured log.
"""

from inventory.alerts.port import StockAlertSink
from inventory.config import alert_sink_kind

_current_sink: StockAlertSink | None = None


def get_sink() -> StockAlertSink:
    """Return the configured alert sink (singleton)."""
    global _current_sink
    if _current_sink is None:
        kind = alert_sink_kind()
        if kind == "recording":
            from inventory.alerts.recording_adapter import RecordingAlertSink

            _current_sink = RecordingAlertSink()
        elif kind == "logging":
            from inventory.alerts.logging_adapter import LoggingAlertSink

            _current_sink = LoggingAlertSink()
        else:
            raise ValueError(f"Unknown alert sink: {kind}")
    return _current_sink


def set_sink(sink: StockAlertSink) -> None:
    """Override the active alert sink (useful for tests)."""
    global _current_sink
    _current_sink = sink


def reset_sink() -> None:
    """Reset to the default sink."""
    global _current_sink
    _current_sink = None
