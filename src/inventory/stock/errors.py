"""Failure classification for stock operations.

Each error extends the protean exception family an outer layer already knows
how to map: validation problems, missing objects and version conflicts.
Business-rule failures carry a ``messages`` dict keyed by the offending field.
"""

from protean.exceptions import (
    ExpectedVersionError,
    ObjectNotFoundError,
    ValidationError,
)


class InvalidArgument(ValidationError):
    """Structurally invalid input, such as a negative initial quantity."""


class InsufficientStock(ValidationError):
    """The change would drive on-hand or available stock below zero."""


class InvalidState(ValidationError):
    """The record's current state does not allow the operation."""


class NotFound(ObjectNotFoundError):
    """No stock record exists under the requested identifier."""


class VersionConflict(ExpectedVersionError):
    """A save was rejected because the stored version moved on."""


class Conflict(ExpectedVersionError):
    """A mutation kept losing the version race until retries ran out."""
