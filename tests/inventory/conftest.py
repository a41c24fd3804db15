import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def inventory_bed():
    from inventory.domain import inventory

    bed = DomainFixture(inventory)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(inventory_bed):
    with inventory_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _adapters():
    """Give every test a fresh store and alert sink."""
    from inventory.alerts import reset_sink, set_sink
    from inventory.alerts.recording_adapter import RecordingAlertSink
    from inventory.store import reset_store, set_store
    from inventory.store.memory_adapter import MemoryStockStore

    set_store(MemoryStockStore())
    set_sink(RecordingAlertSink())
    yield
    reset_store()
    reset_sink()
