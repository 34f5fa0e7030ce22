"""Convenience factory for building the configured read-state store."""

from __future__ import annotations

from fleetwatch.core.config import ReadStateConfig
from fleetwatch.readstate.store import (
    InMemoryReadStateStore,
    ReadStateStore,
    SqliteReadStateStore,
)


def create_read_state_store(config: ReadStateConfig) -> ReadStateStore:
    """Build a store from config.

    Returns:
        SqliteReadStateStore for the ``sqlite`` backend, otherwise an
        empty InMemoryReadStateStore.
    """
    if config.backend == "sqlite":
        return SqliteReadStateStore(config.path)
    return InMemoryReadStateStore()
