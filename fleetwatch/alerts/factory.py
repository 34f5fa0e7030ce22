"""Builds a single Alert from one tracked date on one entity."""

from __future__ import annotations

from fleetwatch.alerts.classifier import DateLike, classify, days_remaining
from fleetwatch.alerts.messages import compose
from fleetwatch.alerts.policy import DEFAULT_POLICY, ThresholdPolicy
from fleetwatch.core.types import Alert, DocumentKind, EntityType, SeverityLevel


def alert_id(entity_type: EntityType, entity_id: str, kind: DocumentKind) -> str:
    """Deterministic id for the (entity, document kind) slot."""
    return f"{entity_type.value}-{entity_id}-{kind.value}"


def build_alert(
    kind: DocumentKind,
    entity_id: str,
    entity_type: EntityType,
    entity_name: str,
    expiry: DateLike | None,
    now: DateLike,
    policy: ThresholdPolicy = DEFAULT_POLICY,
) -> Alert | None:
    """Return an Alert for *expiry*, or None when nothing needs attention.

    None is returned for a missing date and for dates outside every window.
    ``read`` always starts False; callers overlay acknowledgement state.
    """
    if expiry is None:
        return None

    severity = classify(expiry, kind, now, policy)
    if severity == SeverityLevel.OK:
        return None

    days = days_remaining(expiry, now)
    return Alert(
        id=alert_id(entity_type, entity_id, kind),
        document_kind=kind,
        entity_id=entity_id,
        entity_type=entity_type,
        entity_name=entity_name,
        expiry_date=expiry,
        severity=severity,
        message=compose(kind, severity, days),
        days_remaining=days,
    )
