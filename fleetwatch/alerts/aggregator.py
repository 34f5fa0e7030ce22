"""Merges collector outputs into one display-ordered alert list."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from fleetwatch.core.types import Alert, SeverityLevel

logger = structlog.get_logger(__name__)


def _sort_key(alert: Alert) -> tuple[int, int]:
    return (-alert.severity, alert.days_remaining)


def aggregate_all(outputs: Iterable[Iterable[Alert]]) -> list[Alert]:
    """Concatenate collector outputs and order them for display.

    Critical alerts come first, then warnings; within a severity the most
    urgent (lowest days remaining) leads. The sort is stable, so ties keep
    their collector/input order and repeated runs over unchanged input give
    the same id sequence. OK-severity alerts are dropped.
    """
    merged = [
        alert
        for output in outputs
        for alert in output
        if alert.severity != SeverityLevel.OK
    ]
    merged.sort(key=_sort_key)

    logger.debug(
        "alerts_aggregated",
        total=len(merged),
        critical=sum(1 for a in merged if a.severity == SeverityLevel.CRITICAL),
        warning=sum(1 for a in merged if a.severity == SeverityLevel.WARNING),
    )
    return merged
