"""Abstract collector — turns one entity snapshot into candidate alerts."""

from __future__ import annotations

import abc
from collections.abc import Iterable
from typing import ClassVar, Generic, TypeVar

import structlog

from fleetwatch.alerts.classifier import DateLike
from fleetwatch.alerts.factory import build_alert
from fleetwatch.alerts.policy import DEFAULT_POLICY, ThresholdPolicy
from fleetwatch.collectors.types import EntitySnapshot
from fleetwatch.core.types import Alert, DocumentKind, EntityType

logger = structlog.get_logger(__name__)

E = TypeVar("E", bound=EntitySnapshot)

TrackedDate = tuple[DocumentKind, DateLike | None]


class Collector(abc.ABC, Generic[E]):
    """Base class for per-category alert collectors.

    Subclasses declare which entity type they report as, which
    ``FleetSnapshot`` list they read, and which lifecycle statuses end
    monitoring. They implement ``entity_name()`` and ``tracked_dates()``;
    the base class handles gating and alert construction.

    Usage::

        collector = InvoiceCollector()
        alerts = collector.collect_all(snapshot.invoices, now)
    """

    entity_type: ClassVar[EntityType]
    snapshot_field: ClassVar[str]
    terminal_statuses: ClassVar[frozenset[str]] = frozenset()

    @abc.abstractmethod
    def entity_name(self, entity: E) -> str:
        """Human-readable name shown next to the alert."""

    @abc.abstractmethod
    def tracked_dates(self, entity: E) -> list[TrackedDate]:
        """Return (document kind, date or None) pairs to evaluate."""

    def is_monitored(self, entity: E) -> bool:
        """False once the entity reached a terminal lifecycle status."""
        status = getattr(entity, "status", None)
        return status not in self.terminal_statuses

    def collect(
        self,
        entity: E,
        now: DateLike,
        policy: ThresholdPolicy = DEFAULT_POLICY,
    ) -> list[Alert]:
        """Alerts for one entity; missing dates are skipped silently."""
        if not self.is_monitored(entity):
            logger.debug(
                "entity_skipped_terminal_status",
                entity_type=self.entity_type.value,
                entity_id=entity.id,
                status=getattr(entity, "status", None),
            )
            return []

        name = self.entity_name(entity)
        alerts: list[Alert] = []
        for kind, expiry in self.tracked_dates(entity):
            alert = build_alert(
                kind, entity.id, self.entity_type, name, expiry, now, policy,
            )
            if alert is not None:
                alerts.append(alert)
        return alerts

    def collect_all(
        self,
        entities: Iterable[E],
        now: DateLike,
        policy: ThresholdPolicy = DEFAULT_POLICY,
    ) -> list[Alert]:
        """Alerts for every entity, in input order."""
        alerts: list[Alert] = []
        for entity in entities:
            alerts.extend(self.collect(entity, now, policy))
        return alerts
