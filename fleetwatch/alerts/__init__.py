"""Expiry classification, message composition, and alert aggregation."""

from fleetwatch.alerts.aggregator import aggregate_all
from fleetwatch.alerts.classifier import classify, days_remaining
from fleetwatch.alerts.exceptions import ExpiryAlertError, RegistryIncompleteError
from fleetwatch.alerts.factory import alert_id, build_alert
from fleetwatch.alerts.labels import (
    document_icon,
    document_label,
    entity_label,
    severity_color,
)
from fleetwatch.alerts.messages import TEMPLATES, MessageTemplates, compose
from fleetwatch.alerts.policy import (
    DEFAULT_POLICY,
    DEFAULT_THRESHOLDS,
    ThresholdPolicy,
    ensure_complete,
)
from fleetwatch.alerts.summary import (
    AlertSummary,
    filter_alerts,
    summarize,
    unread_count,
)

__all__ = [
    "DEFAULT_POLICY",
    "DEFAULT_THRESHOLDS",
    "TEMPLATES",
    "AlertSummary",
    "ExpiryAlertError",
    "MessageTemplates",
    "RegistryIncompleteError",
    "ThresholdPolicy",
    "aggregate_all",
    "alert_id",
    "build_alert",
    "classify",
    "compose",
    "days_remaining",
    "document_icon",
    "document_label",
    "ensure_complete",
    "entity_label",
    "filter_alerts",
    "severity_color",
    "summarize",
    "unread_count",
]
