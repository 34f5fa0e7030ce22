"""Domain types for expiry tracking — document kinds, severities, alerts."""

from __future__ import annotations

from datetime import date, datetime
from enum import IntEnum, StrEnum

from pydantic import BaseModel, Field, model_validator


class DocumentKind(StrEnum):
    """Deadline-bearing attribute tracked on a fleet entity."""

    LICENSE = "license"
    OCCUPATIONAL_EXAM = "occupational_exam"
    PSYCHOSENSOMETRIC_EXAM = "psychosensometric_exam"
    CIRCULATION_PERMIT = "circulation_permit"
    SOAP_INSURANCE = "soap_insurance"
    TECHNICAL_REVIEW = "technical_review"
    INVOICE_DUE = "invoice_due"
    CALENDAR_EVENT = "calendar_event"
    SERVICE_DEADLINE = "service_deadline"
    MAINTENANCE_SCHEDULE = "maintenance_schedule"


class SeverityLevel(IntEnum):
    """Alert severity — ordered so comparisons work naturally."""

    OK = 0
    WARNING = 1
    CRITICAL = 2


class EntityType(StrEnum):
    """Category of the entity an alert refers to."""

    OPERATOR = "operator"
    TOW_TRUCK = "tow_truck"
    INVOICE = "invoice"
    CALENDAR = "calendar"
    SERVICE = "service"
    MAINTENANCE = "maintenance"


class ThresholdPair(BaseModel):
    """Warning/critical day windows for one document kind."""

    warning_days: int = Field(ge=0)
    critical_days: int = Field(ge=0)

    @model_validator(mode="after")
    def _critical_within_warning(self) -> ThresholdPair:
        if self.critical_days > self.warning_days:
            raise ValueError(
                f"critical_days ({self.critical_days}) must not exceed"
                f" warning_days ({self.warning_days})"
            )
        return self


class Alert(BaseModel):
    """One approaching or overdue deadline for one entity and document kind.

    Alerts are derived on every evaluation pass and never persisted; ``id``
    is stable per (entity_type, entity_id, document_kind) so acknowledgement
    state can be correlated across passes.
    """

    id: str
    document_kind: DocumentKind
    entity_id: str
    entity_type: EntityType
    entity_name: str
    expiry_date: datetime | date
    severity: SeverityLevel
    message: str
    days_remaining: int
    read: bool = False
