"""Acknowledged-alert stores — which alert ids a user has marked read.

Marking is a monotonic set union: once an id is read it stays read until a
caller explicitly clears it. Alert ids are stable per (entity, document kind)
slot, so an acknowledgement survives severity changes of the same item.
"""

from __future__ import annotations

import abc
import sqlite3
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog

from fleetwatch.core.types import Alert
from fleetwatch.readstate.exceptions import ReadStateError

logger = structlog.get_logger(__name__)

_SCHEMA = "CREATE TABLE IF NOT EXISTS read_state (alert_id TEXT PRIMARY KEY)"


class ReadStateStore(abc.ABC):
    """Base class for read-state backends."""

    @abc.abstractmethod
    def is_read(self, alert_id: str) -> bool:
        """Return True if *alert_id* has been acknowledged."""

    @abc.abstractmethod
    def mark_all_read(self, alert_ids: Iterable[str]) -> None:
        """Acknowledge every id in *alert_ids*."""

    @abc.abstractmethod
    def clear(self, alert_id: str) -> None:
        """Forget the acknowledgement for *alert_id*."""

    @abc.abstractmethod
    def read_ids(self) -> frozenset[str]:
        """Snapshot of all acknowledged ids."""

    def mark_read(self, alert_id: str) -> None:
        """Acknowledge a single alert id."""
        self.mark_all_read([alert_id])


class InMemoryReadStateStore(ReadStateStore):
    """Process-local store; safe to share between threads."""

    def __init__(self, read_ids: Iterable[str] = ()) -> None:
        self._ids: set[str] = set(read_ids)
        self._lock = threading.Lock()

    def is_read(self, alert_id: str) -> bool:
        with self._lock:
            return alert_id in self._ids

    def mark_all_read(self, alert_ids: Iterable[str]) -> None:
        new_ids = set(alert_ids)
        with self._lock:
            self._ids |= new_ids
        logger.debug("read_state_marked", count=len(new_ids))

    def clear(self, alert_id: str) -> None:
        with self._lock:
            self._ids.discard(alert_id)

    def read_ids(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._ids)


class SqliteReadStateStore(ReadStateStore):
    """Store persisted in a SQLite ``read_state`` table.

    Marks are ``INSERT OR IGNORE`` statements committed in one transaction,
    so every store sharing the database file, in this process or another,
    contributes to the same monotonic union. Reads always hit the database
    and see other writers' acknowledgements immediately.
    """

    def __init__(self, path: str | Path, timeout: float = 30.0) -> None:
        self._path = Path(path)
        self._timeout = timeout
        self._path.parent.mkdir(parents=True, exist_ok=True)

        with self._connect() as conn:
            conn.execute(_SCHEMA)
            (count,) = conn.execute("SELECT COUNT(*) FROM read_state").fetchall()[0]
        logger.info("read_state_loaded", path=str(self._path), count=count)

    @property
    def path(self) -> Path:
        return self._path

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, commit on success and close it afterwards."""
        try:
            conn = sqlite3.connect(self._path, timeout=self._timeout)
        except sqlite3.Error as exc:
            raise ReadStateError(f"Cannot open {self._path}: {exc}") from exc
        try:
            with conn:
                yield conn
        except sqlite3.DatabaseError as exc:
            raise ReadStateError(f"Cannot use {self._path}: {exc}") from exc
        finally:
            conn.close()

    def is_read(self, alert_id: str) -> bool:
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT 1 FROM read_state WHERE alert_id = ?", (alert_id,)
            ).fetchall()
        return bool(rows)

    def mark_all_read(self, alert_ids: Iterable[str]) -> None:
        new_ids = sorted(set(alert_ids))
        if not new_ids:
            return
        with self._connect() as conn:
            conn.executemany(
                "INSERT OR IGNORE INTO read_state (alert_id) VALUES (?)",
                [(i,) for i in new_ids],
            )
        logger.info("read_state_marked", path=str(self._path), count=len(new_ids))

    def clear(self, alert_id: str) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM read_state WHERE alert_id = ?", (alert_id,))

    def read_ids(self) -> frozenset[str]:
        with self._connect() as conn:
            rows = conn.execute("SELECT alert_id FROM read_state").fetchall()
        return frozenset(row[0] for row in rows)


def apply_read_state(alerts: Iterable[Alert], store: ReadStateStore) -> list[Alert]:
    """Return copies of *alerts* with ``read`` taken from *store*."""
    read = store.read_ids()
    return [a.model_copy(update={"read": a.id in read}) for a in alerts]
