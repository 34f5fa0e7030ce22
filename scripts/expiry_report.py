#!/usr/bin/env python3
"""Expiry report CLI — list approaching and overdue fleet deadlines.

Usage::

    # Evaluate a snapshot against today's date
    python scripts/expiry_report.py --snapshot data/fleet.yaml

    # Pin the evaluation date and show only critical alerts
    python scripts/expiry_report.py --snapshot data/fleet.yaml \\
        --now 2025-06-01 --severity critical

    # Hide acknowledged alerts, then acknowledge everything shown
    python scripts/expiry_report.py --snapshot data/fleet.yaml \\
        --unread-only --mark-all-read

    # JSON output
    python scripts/expiry_report.py --snapshot data/fleet.yaml --json
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date, datetime

import structlog

from fleetwatch.alerts.classifier import DateLike
from fleetwatch.alerts.labels import (
    document_icon,
    document_label,
    entity_label,
    severity_color,
)
from fleetwatch.alerts.summary import AlertSummary, filter_alerts, summarize
from fleetwatch.collectors.snapshot import load_snapshot
from fleetwatch.core.config import load_settings
from fleetwatch.core.logging import setup_logging
from fleetwatch.core.types import Alert, SeverityLevel
from fleetwatch.engine import AlertEngine
from fleetwatch.readstate.exceptions import ReadStateError
from fleetwatch.readstate.factory import create_read_state_store
from fleetwatch.readstate.store import apply_read_state

logger = structlog.get_logger(__name__)


def parse_now(value: str | None) -> DateLike:
    """Parse ``--now`` (ISO date or datetime); defaults to local now."""
    if not value:
        return datetime.now()
    if "T" in value or " " in value:
        return datetime.fromisoformat(value)
    return date.fromisoformat(value)


def _days_text(days: int) -> str:
    if days < 0:
        return f"{-days}d late"
    if days == 0:
        return "today"
    return f"in {days}d"


def render_alert_line(alert: Alert) -> str:
    """One table row for *alert*."""
    marker = " " if alert.read else "*"
    severity = alert.severity.name
    kind = document_label(alert.document_kind)[:22]
    entity = f"{entity_label(alert.entity_type)}: {alert.entity_name}"[:32]
    return (
        f"{marker} {severity:<8}  {_days_text(alert.days_remaining):>9}  "
        f"{kind:<22}  {entity:<32}  {alert.message}"
    )


def render_summary(summary: AlertSummary) -> str:
    return (
        f"{summary.total} alerts: {summary.critical} critical,"
        f" {summary.warning} warning, {summary.unread} unread"
    )


def render_report(alerts: list[Alert], now: DateLike) -> str:
    """Render alerts as an ASCII table with a summary footer."""
    lines = [f"Expiry alerts as of {now.isoformat()}", ""]
    if not alerts:
        lines.append("No alerts.")
        return "\n".join(lines)

    header = (
        f"  {'Severity':<8}  {'Due':>9}  {'Document':<22}  {'Entity':<32}  Message"
    )
    lines.append(header)
    lines.append("-" * len(header))
    lines.extend(render_alert_line(a) for a in alerts)
    lines.append("")
    lines.append(render_summary(summarize(alerts)))
    return "\n".join(lines)


def _alert_dicts(alerts: list[Alert]) -> list[dict[str, object]]:
    rows = []
    for a in alerts:
        row = a.model_dump(mode="json")
        row["severity"] = a.severity.name.lower()
        row["icon"] = document_icon(a.document_kind)
        row["color"] = severity_color(a.severity)
        rows.append(row)
    return rows


def run_report(args: argparse.Namespace) -> int:
    """Evaluate the snapshot, print the report, optionally acknowledge."""
    settings = load_settings(args.config)
    setup_logging(level=args.log_level or "WARNING")

    try:
        now = parse_now(args.now)
    except ValueError:
        print(f"Invalid --now value: {args.now}", file=sys.stderr)
        return 1

    try:
        store = create_read_state_store(settings.read_state)
    except ReadStateError as exc:
        logger.error("read_state_unavailable", error=str(exc))
        print(f"Cannot load read state: {exc}", file=sys.stderr)
        return 1

    snapshot = load_snapshot(args.snapshot)
    engine = AlertEngine.from_settings(settings)
    alerts = apply_read_state(engine.evaluate(snapshot, now), store)

    severity = SeverityLevel[args.severity.upper()] if args.severity else None
    shown = filter_alerts(alerts, severity=severity, unread_only=args.unread_only)

    if args.json:
        print(json.dumps(_alert_dicts(shown), indent=2))
    else:
        print(render_report(shown, now))

    if args.mark_all_read and shown:
        store.mark_all_read(a.id for a in shown)
        print(f"\nMarked {len(shown)} alerts as read.", file=sys.stderr)

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report fleet documents and deadlines that need attention.",
    )
    parser.add_argument(
        "--snapshot",
        required=True,
        help="Path to a YAML/JSON fleet snapshot",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML (default: config/settings.yaml)",
    )
    parser.add_argument(
        "--now",
        default=None,
        help="Evaluation date or datetime in ISO format (default: now)",
    )
    parser.add_argument(
        "--severity",
        choices=["critical", "warning"],
        default=None,
        help="Only show alerts of this severity",
    )
    parser.add_argument(
        "--unread-only",
        action="store_true",
        help="Hide alerts that were already acknowledged",
    )
    parser.add_argument(
        "--mark-all-read",
        action="store_true",
        help="Acknowledge every alert shown",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output raw JSON instead of table",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level override (default: WARNING)",
    )
    return parser


def main() -> None:
    args = build_parser().parse_args()
    sys.exit(run_report(args))


if __name__ == "__main__":
    main()
