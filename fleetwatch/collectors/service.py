"""Service-order collector — scheduled service dates."""

from __future__ import annotations

from fleetwatch.collectors.base import Collector, TrackedDate
from fleetwatch.collectors.types import ServiceSnapshot, ServiceStatus
from fleetwatch.core.types import DocumentKind, EntityType


class ServiceDeadlineCollector(Collector[ServiceSnapshot]):
    entity_type = EntityType.SERVICE
    snapshot_field = "services"
    terminal_statuses = frozenset({ServiceStatus.COMPLETED, ServiceStatus.CANCELLED})

    def entity_name(self, entity: ServiceSnapshot) -> str:
        return entity.service_number

    def tracked_dates(self, entity: ServiceSnapshot) -> list[TrackedDate]:
        return [(DocumentKind.SERVICE_DEADLINE, entity.service_date)]
