"""Inventory bounded context — stock accounting for SKUs.

Tracks on-hand and reserved quantities per stock record, derives low-stock
alerts, and guards concurrent mutations with optimistic version checks.
"""

import structlog
from protean.domain import Domain

inventory = Domain(name="inventory")

logger = structlog.get_logger(__name__)
