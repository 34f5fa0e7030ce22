"""Schedule collector — calendar event start times."""

from __future__ import annotations

from fleetwatch.collectors.base import Collector, TrackedDate
from fleetwatch.collectors.types import CalendarEventSnapshot, EventStatus
from fleetwatch.core.types import DocumentKind, EntityType


class CalendarEventCollector(Collector[CalendarEventSnapshot]):
    """Treats the event start as the deadline until it completes or is cancelled."""

    entity_type = EntityType.CALENDAR
    snapshot_field = "calendar_events"
    terminal_statuses = frozenset({EventStatus.COMPLETED, EventStatus.CANCELLED})

    def entity_name(self, entity: CalendarEventSnapshot) -> str:
        return entity.title

    def tracked_dates(self, entity: CalendarEventSnapshot) -> list[TrackedDate]:
        return [(DocumentKind.CALENDAR_EVENT, entity.start)]
