"""Domain error taxonomy.

``NotFoundError`` is absorbed by local operations; the snapshot and
storage errors cross the persistence boundary and reach the user.
"""

from __future__ import annotations


class TierError(Exception):
    """Base class for all tierctl domain errors."""

    code = "TIER_ERROR"


class NotFoundError(TierError):
    """A referenced tier, item, or container id does not exist."""

    code = "NOT_FOUND"

    def __init__(self, kind: str, identifier: str) -> None:
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"No {kind} found with ID: {identifier}")


class MalformedSnapshotError(TierError):
    """A persisted or uploaded document failed schema validation."""

    code = "MALFORMED_SNAPSHOT"


class StorageUnavailableError(TierError):
    """The persistence medium rejected a read or write."""

    code = "STORAGE_UNAVAILABLE"
