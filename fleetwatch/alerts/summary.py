"""Filtering and counting helpers over an aggregated alert list."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from pydantic import BaseModel, Field

from fleetwatch.core.types import Alert, DocumentKind, SeverityLevel


class AlertSummary(BaseModel):
    """Headline counts for a notification badge or report footer."""

    total: int = 0
    critical: int = 0
    warning: int = 0
    unread: int = 0
    by_kind: dict[DocumentKind, int] = Field(default_factory=dict)


def filter_alerts(
    alerts: Iterable[Alert],
    severity: SeverityLevel | None = None,
    unread_only: bool = False,
) -> list[Alert]:
    """Keep alerts matching *severity* (any if None), preserving order."""
    return [
        a
        for a in alerts
        if (severity is None or a.severity == severity)
        and not (unread_only and a.read)
    ]


def unread_count(alerts: Iterable[Alert]) -> int:
    return sum(1 for a in alerts if not a.read)


def summarize(alerts: Iterable[Alert]) -> AlertSummary:
    alerts = list(alerts)
    by_kind = Counter(a.document_kind for a in alerts)
    return AlertSummary(
        total=len(alerts),
        critical=sum(1 for a in alerts if a.severity == SeverityLevel.CRITICAL),
        warning=sum(1 for a in alerts if a.severity == SeverityLevel.WARNING),
        unread=unread_count(alerts),
        by_kind=dict(by_kind),
    )
