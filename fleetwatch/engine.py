"""AlertEngine — runs every collector over a snapshot and aggregates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from fleetwatch.alerts.aggregator import aggregate_all
from fleetwatch.alerts.classifier import DateLike
from fleetwatch.alerts.policy import DEFAULT_POLICY, ThresholdPolicy
from fleetwatch.collectors.base import Collector
from fleetwatch.collectors.financial import InvoiceCollector
from fleetwatch.collectors.fleet import FleetAssetCollector
from fleetwatch.collectors.maintenance import MaintenanceCollector
from fleetwatch.collectors.personnel import PersonnelCollector
from fleetwatch.collectors.schedule import CalendarEventCollector
from fleetwatch.collectors.service import ServiceDeadlineCollector
from fleetwatch.collectors.snapshot import FleetSnapshot
from fleetwatch.core.config import Settings
from fleetwatch.core.types import Alert, DocumentKind

logger = structlog.get_logger(__name__)


def default_collectors() -> list[Collector]:
    """One collector per snapshot section, in display tie-break order."""
    return [
        PersonnelCollector(),
        FleetAssetCollector(),
        InvoiceCollector(),
        CalendarEventCollector(),
        ServiceDeadlineCollector(),
        MaintenanceCollector(),
    ]


class AlertEngine:
    """Stateless evaluator from (snapshot, now) to an ordered alert list.

    The engine holds only immutable configuration, so one instance can be
    shared between callers and threads. ``now`` is always passed in.

    Usage::

        engine = AlertEngine.from_settings(get_settings())
        alerts = engine.evaluate(snapshot, now=datetime.now(UTC))
        alerts = apply_read_state(alerts, store)
    """

    def __init__(
        self,
        policy: ThresholdPolicy = DEFAULT_POLICY,
        collectors: Sequence[Collector] | None = None,
        enabled_kinds: Iterable[DocumentKind] | None = None,
    ) -> None:
        self._policy = policy
        self._collectors: tuple[Collector, ...] = tuple(
            collectors if collectors is not None else default_collectors()
        )
        self._enabled_kinds = frozenset(
            enabled_kinds if enabled_kinds is not None else DocumentKind
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> AlertEngine:
        return cls(
            policy=ThresholdPolicy.from_config(settings.alerts),
            enabled_kinds=settings.alerts.enabled_kinds(),
        )

    @property
    def policy(self) -> ThresholdPolicy:
        return self._policy

    @property
    def collectors(self) -> tuple[Collector, ...]:
        return self._collectors

    @property
    def enabled_kinds(self) -> frozenset[DocumentKind]:
        return self._enabled_kinds

    def collect(self, snapshot: FleetSnapshot, now: DateLike) -> list[list[Alert]]:
        """Per-collector outputs, before ordering."""
        outputs: list[list[Alert]] = []
        for collector in self._collectors:
            entities = getattr(snapshot, collector.snapshot_field)
            alerts = collector.collect_all(entities, now, self._policy)
            outputs.append(
                [a for a in alerts if a.document_kind in self._enabled_kinds]
            )
        return outputs

    def evaluate(self, snapshot: FleetSnapshot, now: DateLike) -> list[Alert]:
        """Evaluate every entity in *snapshot* and return ordered alerts."""
        alerts = aggregate_all(self.collect(snapshot, now))
        logger.info(
            "alerts_evaluated",
            entities=snapshot.entity_count,
            alerts=len(alerts),
            now=str(now),
        )
        return alerts
