"""Alert message templates and the pure composer that fills them in."""

from __future__ import annotations

from pydantic import BaseModel

from fleetwatch.alerts.policy import ensure_complete
from fleetwatch.core.types import DocumentKind, SeverityLevel


class MessageTemplates(BaseModel):
    """Wording for one document kind at each alerting stage."""

    warning: str
    critical: str
    expired: str


# ── Template table ──────────────────────────────────────────────

TEMPLATES: dict[DocumentKind, MessageTemplates] = ensure_complete("message", {
    DocumentKind.LICENSE: MessageTemplates(
        warning="Driver's license expires soon,",
        critical="Driver's license is about to expire,",
        expired="Driver's license expired",
    ),
    DocumentKind.OCCUPATIONAL_EXAM: MessageTemplates(
        warning="Occupational exam expires soon,",
        critical="Occupational exam is about to expire,",
        expired="Occupational exam expired",
    ),
    DocumentKind.PSYCHOSENSOMETRIC_EXAM: MessageTemplates(
        warning="Psychosensometric exam expires soon,",
        critical="Psychosensometric exam is about to expire,",
        expired="Psychosensometric exam expired",
    ),
    DocumentKind.CIRCULATION_PERMIT: MessageTemplates(
        warning="Circulation permit expires soon,",
        critical="Circulation permit is about to expire,",
        expired="Circulation permit expired",
    ),
    DocumentKind.SOAP_INSURANCE: MessageTemplates(
        warning="SOAP insurance expires soon,",
        critical="SOAP insurance is about to expire,",
        expired="SOAP insurance expired",
    ),
    DocumentKind.TECHNICAL_REVIEW: MessageTemplates(
        warning="Technical review expires soon,",
        critical="Technical review is about to expire,",
        expired="Technical review expired",
    ),
    DocumentKind.INVOICE_DUE: MessageTemplates(
        warning="Invoice falls due",
        critical="Invoice payment is due",
        expired="Invoice fell due",
    ),
    DocumentKind.CALENDAR_EVENT: MessageTemplates(
        warning="Upcoming event",
        critical="Event starts",
        expired="Event started",
    ),
    DocumentKind.SERVICE_DEADLINE: MessageTemplates(
        warning="Service deadline approaching,",
        critical="Service deadline is due",
        expired="Service deadline passed",
    ),
    DocumentKind.MAINTENANCE_SCHEDULE: MessageTemplates(
        warning="Scheduled maintenance coming up",
        critical="Scheduled maintenance is due",
        expired="Scheduled maintenance fell due",
    ),
})


def compose(kind: DocumentKind, severity: SeverityLevel, days: int) -> str:
    """Render the display message for an alert.

    Returns an empty string for OK. Overdue items use the expired wording
    regardless of severity.
    """
    if severity == SeverityLevel.OK:
        return ""

    templates = TEMPLATES[kind]
    if days < 0:
        return f"{templates.expired} {abs(days)} days ago"

    if severity == SeverityLevel.CRITICAL:
        if days == 0:
            return f"{templates.critical} today"
        return f"{templates.critical} in {days} days"

    return f"{templates.warning} in {days} days"
