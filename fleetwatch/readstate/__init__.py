"""Read-state tracking for acknowledged alerts."""

from fleetwatch.readstate.exceptions import ReadStateError
from fleetwatch.readstate.factory import create_read_state_store
from fleetwatch.readstate.store import (
    InMemoryReadStateStore,
    ReadStateStore,
    SqliteReadStateStore,
    apply_read_state,
)

__all__ = [
    "InMemoryReadStateStore",
    "ReadStateError",
    "ReadStateStore",
    "SqliteReadStateStore",
    "apply_read_state",
    "create_read_state_store",
]
