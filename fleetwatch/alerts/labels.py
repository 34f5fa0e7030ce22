"""Display labels for document kinds, entity types and severities."""

from __future__ import annotations

from fleetwatch.alerts.policy import ensure_complete
from fleetwatch.core.types import DocumentKind, EntityType, SeverityLevel

DOCUMENT_LABELS: dict[DocumentKind, str] = ensure_complete("label", {
    DocumentKind.LICENSE: "Driver's License",
    DocumentKind.OCCUPATIONAL_EXAM: "Occupational Exam",
    DocumentKind.PSYCHOSENSOMETRIC_EXAM: "Psychosensometric Exam",
    DocumentKind.CIRCULATION_PERMIT: "Circulation Permit",
    DocumentKind.SOAP_INSURANCE: "SOAP Insurance",
    DocumentKind.TECHNICAL_REVIEW: "Technical Review",
    DocumentKind.INVOICE_DUE: "Invoice",
    DocumentKind.CALENDAR_EVENT: "Event",
    DocumentKind.SERVICE_DEADLINE: "Service Deadline",
    DocumentKind.MAINTENANCE_SCHEDULE: "Maintenance",
})

# Icon names follow the lucide set used by the web front end.
DOCUMENT_ICONS: dict[DocumentKind, str] = ensure_complete("icon", {
    DocumentKind.LICENSE: "id-card",
    DocumentKind.OCCUPATIONAL_EXAM: "stethoscope",
    DocumentKind.PSYCHOSENSOMETRIC_EXAM: "brain",
    DocumentKind.CIRCULATION_PERMIT: "file-text",
    DocumentKind.SOAP_INSURANCE: "shield-check",
    DocumentKind.TECHNICAL_REVIEW: "car",
    DocumentKind.INVOICE_DUE: "receipt",
    DocumentKind.CALENDAR_EVENT: "calendar",
    DocumentKind.SERVICE_DEADLINE: "clock",
    DocumentKind.MAINTENANCE_SCHEDULE: "tool",
})

ENTITY_LABELS: dict[EntityType, str] = {
    EntityType.OPERATOR: "Operator",
    EntityType.TOW_TRUCK: "Tow Truck",
    EntityType.INVOICE: "Invoice",
    EntityType.CALENDAR: "Calendar",
    EntityType.SERVICE: "Service",
    EntityType.MAINTENANCE: "Maintenance",
}

SEVERITY_COLORS: dict[SeverityLevel, str] = {
    SeverityLevel.CRITICAL: "red",
    SeverityLevel.WARNING: "orange",
    SeverityLevel.OK: "green",
}


def document_label(kind: DocumentKind) -> str:
    return DOCUMENT_LABELS[kind]


def entity_label(entity_type: EntityType) -> str:
    return ENTITY_LABELS[entity_type]


def document_icon(kind: DocumentKind) -> str:
    return DOCUMENT_ICONS[kind]


def severity_color(severity: SeverityLevel) -> str:
    return SEVERITY_COLORS[severity]
