"""Maintenance collector — planned tow truck maintenance slots."""

from __future__ import annotations

from fleetwatch.collectors.base import Collector, TrackedDate
from fleetwatch.collectors.types import EventStatus, MaintenanceSnapshot
from fleetwatch.core.types import DocumentKind, EntityType


class MaintenanceCollector(Collector[MaintenanceSnapshot]):
    entity_type = EntityType.MAINTENANCE
    snapshot_field = "maintenance"
    terminal_statuses = frozenset({EventStatus.COMPLETED, EventStatus.CANCELLED})

    def entity_name(self, entity: MaintenanceSnapshot) -> str:
        if entity.description:
            return f"{entity.tow_truck_name} ({entity.description})"
        return entity.tow_truck_name

    def tracked_dates(self, entity: MaintenanceSnapshot) -> list[TrackedDate]:
        return [(DocumentKind.MAINTENANCE_SCHEDULE, entity.scheduled_date)]
