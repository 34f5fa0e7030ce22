"""Read-only entity snapshots handed to the collectors.

Only the fields the alert engine reads are modelled; anything else in the
source records is ignored.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class TowTruckStatus(StrEnum):
    AVAILABLE = "available"
    IN_SERVICE = "in_service"
    MAINTENANCE = "maintenance"
    OUT_OF_SERVICE = "out_of_service"


class InvoiceStatus(StrEnum):
    DRAFT = "draft"
    ISSUED = "issued"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"


class EventStatus(StrEnum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class EventType(StrEnum):
    SERVICE = "service"
    MAINTENANCE = "maintenance"
    MEETING = "meeting"
    OTHER = "other"


class ServiceStatus(StrEnum):
    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class EntitySnapshot(BaseModel):
    """Common base — every tracked entity carries an id."""

    model_config = ConfigDict(coerce_numbers_to_str=True, frozen=True)

    id: str


class OperatorSnapshot(EntitySnapshot):
    """Tow-truck operator with personal certification dates."""

    name: str
    license_number: str = ""
    license_expiry: date | None = None
    occupational_exam_expiry: date | None = None
    psychosensometric_exam_expiry: date | None = None


class TowTruckSnapshot(EntitySnapshot):
    """Fleet vehicle with its compliance document dates."""

    name: str
    license_plate: str = ""
    status: TowTruckStatus = TowTruckStatus.AVAILABLE
    circulation_permit_expiry: date | None = None
    soap_expiry: date | None = None
    technical_review_expiry: date | None = None


class InvoiceSnapshot(EntitySnapshot):
    invoice_number: str
    status: InvoiceStatus = InvoiceStatus.DRAFT
    due_date: date | None = None


class CalendarEventSnapshot(EntitySnapshot):
    title: str
    start: datetime | None = None
    event_type: EventType = EventType.OTHER
    status: EventStatus = EventStatus.SCHEDULED


class ServiceSnapshot(EntitySnapshot):
    service_number: str
    service_date: date | None = None
    status: ServiceStatus = ServiceStatus.PENDING


class MaintenanceSnapshot(EntitySnapshot):
    """Planned maintenance slot for a tow truck."""

    tow_truck_id: str = ""
    tow_truck_name: str
    description: str = ""
    scheduled_date: date | None = None
    status: EventStatus = EventStatus.SCHEDULED
