"""Read-state store exceptions."""

from __future__ import annotations


class ReadStateError(Exception):
    """The persisted read-state could not be opened or read."""
