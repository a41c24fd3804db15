"""StockRecord aggregate — the core of the inventory domain.

A StockRecord tracks one SKU owned by one account:

    quantity_on_hand:  Physical count in stock
    reserved_quantity: Held for pending orders (not yet shipped)
    available:         quantity_on_hand - reserved_quantity
    threshold:         Low-stock alert level, fixed at creation

Operations never mutate the record they are called on. Each one validates
against the current state and returns a new record (version + 1) together
with the LowStockDetected event it produced, if any. Persisting the new
record, and forwarding the event afterwards, is the caller's job; see
``inventory.stock.keeper``.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, Integer, String, ValueObject

from inventory.domain import inventory
from inventory.shared.money import Money
from inventory.stock.errors import InsufficientStock, InvalidArgument, InvalidState
from inventory.stock.events import LowStockDetected


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@inventory.value_object(part_of="StockRecord")
class AuditStamp:
    """Creation and last-modification timestamps, composed onto the record."""

    created_at = DateTime(required=True)
    updated_at = DateTime(required=True)

    @classmethod
    def fresh(cls, at=None):
        at = at or datetime.now(UTC)
        return cls(created_at=at, updated_at=at)

    def touched(self, at=None):
        return AuditStamp(created_at=self.created_at, updated_at=at or datetime.now(UTC))


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@inventory.aggregate
class StockRecord:
    """Stock levels for a single SKU, guarded by an explicit version counter."""

    owner_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    unit_price = ValueObject(Money, required=True)
    quantity_on_hand = Integer(required=True, min_value=0)
    reserved_quantity = Integer(default=0, min_value=0)
    threshold = Integer(required=True, min_value=0)
    version = Integer(default=0)
    audit = ValueObject(AuditStamp)

    @property
    def available(self):
        return self.quantity_on_hand - self.reserved_quantity

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, owner_id, name, unit_price, initial_quantity, threshold):
        """Create a record with nothing reserved.

        No low-stock event is derived here, even when the initial quantity is
        already at or below the threshold.
        """
        if initial_quantity < 0:
            raise InvalidArgument({"initial_quantity": ["Initial quantity cannot be negative"]})
        if threshold < 0:
            raise InvalidArgument({"threshold": ["Threshold cannot be negative"]})

        return cls(
            owner_id=owner_id,
            name=name,
            unit_price=unit_price,
            quantity_on_hand=initial_quantity,
            reserved_quantity=0,
            threshold=threshold,
            version=0,
            audit=AuditStamp.fresh(),
        )

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _field_state(self):
        # Value objects are immutable, so they can be shared between copies
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "name": self.name,
            "unit_price": self.unit_price,
            "quantity_on_hand": self.quantity_on_hand,
            "reserved_quantity": self.reserved_quantity,
            "threshold": self.threshold,
            "version": self.version,
            "audit": self.audit,
        }

    def snapshot(self):
        """Return an independent copy of this record at the same version."""
        return StockRecord(**self._field_state())

    def _evolve(self, **changes):
        """Return the next version of this record with ``changes`` applied."""
        state = self._field_state()
        state["version"] = self.version + 1
        state["audit"] = self.audit.touched() if self.audit else AuditStamp.fresh()
        state.update(changes)
        return StockRecord(**state)

    def _low_stock(self, quantity_on_hand):
        return LowStockDetected(
            record_id=str(self.id),
            name=self.name,
            quantity_on_hand=quantity_on_hand,
            threshold=self.threshold,
            detected_at=datetime.now(UTC),
        )

    # -------------------------------------------------------------------
    # Stock adjustment
    # -------------------------------------------------------------------
    def adjust(self, delta):
        """Apply a signed change to the physical on-hand count.

        Reservations are not consulted, so a large negative adjustment may
        leave more reserved than on hand.
        """
        new_quantity = self.quantity_on_hand + delta
        if new_quantity < 0:
            raise InsufficientStock(
                {"delta": [f"Insufficient stock to adjust: {self.quantity_on_hand} on hand, change of {delta}"]}
            )

        updated = self._evolve(quantity_on_hand=new_quantity)

        if new_quantity <= self.threshold:
            return updated, updated._low_stock(new_quantity)
        return updated, None

    # -------------------------------------------------------------------
    # Reservations
    # -------------------------------------------------------------------
    def reserve(self, quantity):
        """Hold ``quantity`` units for a pending order.

        The low-stock check looks at what is left available, but the event
        reports the on-hand count.
        """
        if quantity <= 0:
            raise InvalidArgument({"quantity": ["Quantity must be positive"]})

        available = self.available
        if available < quantity:
            raise InsufficientStock(
                {"quantity": [f"Not enough stock to reserve for {self.name}: {available} available, {quantity} requested"]}
            )

        updated = self._evolve(reserved_quantity=self.reserved_quantity + quantity)

        if updated.available <= self.threshold:
            return updated, updated._low_stock(updated.quantity_on_hand)
        return updated, None

    def release(self, quantity):
        """Cancel ``quantity`` reserved units. Never raises an event."""
        if quantity <= 0:
            raise InvalidArgument({"quantity": ["Quantity must be positive"]})

        if quantity > self.reserved_quantity:
            raise InvalidState(
                {"quantity": [f"Cannot release more than reserved for {self.name}: {self.reserved_quantity} reserved"]}
            )

        return self._evolve(reserved_quantity=self.reserved_quantity - quantity)
