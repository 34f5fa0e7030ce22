"""Threshold policy — warning/critical day windows per document kind."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from fleetwatch.alerts.exceptions import RegistryIncompleteError
from fleetwatch.core.config import AlertsConfig
from fleetwatch.core.types import DocumentKind, ThresholdPair

V = TypeVar("V")

_DOCUMENT_WINDOW = ThresholdPair(warning_days=30, critical_days=7)

DEFAULT_THRESHOLDS: dict[DocumentKind, ThresholdPair] = {
    DocumentKind.LICENSE: _DOCUMENT_WINDOW,
    DocumentKind.OCCUPATIONAL_EXAM: _DOCUMENT_WINDOW,
    DocumentKind.PSYCHOSENSOMETRIC_EXAM: _DOCUMENT_WINDOW,
    DocumentKind.CIRCULATION_PERMIT: _DOCUMENT_WINDOW,
    DocumentKind.SOAP_INSURANCE: _DOCUMENT_WINDOW,
    DocumentKind.TECHNICAL_REVIEW: _DOCUMENT_WINDOW,
    DocumentKind.INVOICE_DUE: ThresholdPair(warning_days=7, critical_days=1),
    DocumentKind.CALENDAR_EVENT: ThresholdPair(warning_days=3, critical_days=1),
    DocumentKind.SERVICE_DEADLINE: ThresholdPair(warning_days=2, critical_days=0),
    DocumentKind.MAINTENANCE_SCHEDULE: ThresholdPair(warning_days=14, critical_days=3),
}


def ensure_complete(registry: str, table: Mapping[DocumentKind, V]) -> dict[DocumentKind, V]:
    """Return *table* as a dict, raising if any DocumentKind is missing."""
    missing = [kind.value for kind in DocumentKind if kind not in table]
    if missing:
        raise RegistryIncompleteError(registry, missing)
    return dict(table)


class ThresholdPolicy:
    """Complete mapping of document kind to its threshold windows.

    Overrides are merged over the built-in defaults and the result is
    checked for completeness once, at construction, so ``lookup`` is total.
    """

    def __init__(
        self,
        overrides: Mapping[DocumentKind, ThresholdPair] | None = None,
        defaults: Mapping[DocumentKind, ThresholdPair] = DEFAULT_THRESHOLDS,
    ) -> None:
        merged = dict(defaults)
        if overrides:
            merged.update(overrides)
        self._thresholds = ensure_complete("threshold", merged)

    @classmethod
    def from_config(cls, config: AlertsConfig) -> ThresholdPolicy:
        return cls(overrides=config.thresholds)

    def lookup(self, kind: DocumentKind) -> ThresholdPair:
        """Return the (warning_days, critical_days) pair for *kind*."""
        return self._thresholds[kind]

    def as_dict(self) -> dict[DocumentKind, ThresholdPair]:
        """Read-only copy of the full threshold table."""
        return dict(self._thresholds)


# Built at import so an incomplete default table stops the host at startup.
DEFAULT_POLICY = ThresholdPolicy()
