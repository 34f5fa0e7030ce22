"""End-to-end tests for AlertEngine over a mixed fleet snapshot."""

from __future__ import annotations

from datetime import datetime, timedelta

from fleetwatch.alerts.policy import ThresholdPolicy
from fleetwatch.collectors.personnel import PersonnelCollector
from fleetwatch.collectors.snapshot import FleetSnapshot
from fleetwatch.collectors.types import (
    CalendarEventSnapshot,
    EventStatus,
    InvoiceSnapshot,
    InvoiceStatus,
    MaintenanceSnapshot,
    OperatorSnapshot,
    ServiceSnapshot,
    TowTruckSnapshot,
)
from fleetwatch.core.config import AlertsConfig, Settings
from fleetwatch.core.types import DocumentKind, SeverityLevel, ThresholdPair
from fleetwatch.engine import AlertEngine, default_collectors

NOW = datetime(2025, 6, 1, 9, 30)
TODAY = NOW.date()


def _days(n: int):
    return TODAY + timedelta(days=n)


def _snapshot() -> FleetSnapshot:
    return FleetSnapshot(
        operators=[
            OperatorSnapshot(id="op-1", name="Juan Pérez", license_expiry=_days(5)),
            OperatorSnapshot(
                id="op-2",
                name="María González",
                license_expiry=None,
                occupational_exam_expiry=_days(20),
            ),
        ],
        tow_trucks=[
            TowTruckSnapshot(
                id="gr-1",
                name="Grúa 1",
                soap_expiry=_days(-3),
                technical_review_expiry=_days(90),
            ),
        ],
        invoices=[
            InvoiceSnapshot(
                id="inv-1",
                invoice_number="F-001024",
                status=InvoiceStatus.ISSUED,
                due_date=_days(-1),
            ),
            InvoiceSnapshot(
                id="inv-2",
                invoice_number="F-001025",
                status=InvoiceStatus.PAID,
                due_date=_days(-10),
            ),
        ],
        calendar_events=[
            CalendarEventSnapshot(
                id="ev-1",
                title="Fleet review",
                start=NOW + timedelta(days=10),
                status=EventStatus.SCHEDULED,
            ),
        ],
        services=[
            ServiceSnapshot(id="srv-1", service_number="SRV-1", service_date=_days(2)),
        ],
        maintenance=[
            MaintenanceSnapshot(id="mnt-1", tow_truck_name="Grúa 1", scheduled_date=_days(10)),
        ],
    )


class TestScenarios:
    def test_expected_alert_set(self) -> None:
        alerts = AlertEngine().evaluate(_snapshot(), NOW)
        assert [a.id for a in alerts] == [
            "tow_truck-gr-1-soap_insurance",
            "invoice-inv-1-invoice_due",
            "operator-op-1-license",
            "service-srv-1-service_deadline",
            "maintenance-mnt-1-maintenance_schedule",
            "operator-op-2-occupational_exam",
        ]

    def test_license_scenario(self) -> None:
        alerts = {a.id: a for a in AlertEngine().evaluate(_snapshot(), NOW)}
        alert = alerts["operator-op-1-license"]
        assert alert.severity == SeverityLevel.CRITICAL
        assert alert.days_remaining == 5
        assert alert.message.endswith("in 5 days")

    def test_invoice_scenario(self) -> None:
        alerts = {a.id: a for a in AlertEngine().evaluate(_snapshot(), NOW)}
        alert = alerts["invoice-inv-1-invoice_due"]
        assert alert.severity == SeverityLevel.CRITICAL
        assert alert.days_remaining == -1
        assert alert.message.endswith("1 days ago")
        assert "invoice-inv-2-invoice_due" not in alerts

    def test_distant_event_produces_no_alert(self) -> None:
        ids = [a.id for a in AlertEngine().evaluate(_snapshot(), NOW)]
        assert not any(i.startswith("calendar-") for i in ids)

    def test_maintenance_scenario(self) -> None:
        alerts = {a.id: a for a in AlertEngine().evaluate(_snapshot(), NOW)}
        alert = alerts["maintenance-mnt-1-maintenance_schedule"]
        assert alert.severity == SeverityLevel.WARNING
        assert alert.days_remaining == 10

    def test_empty_snapshot(self) -> None:
        assert AlertEngine().evaluate(FleetSnapshot(), NOW) == []


class TestProperties:
    def test_idempotent(self) -> None:
        engine = AlertEngine()
        snap = _snapshot()
        first = [a.id for a in engine.evaluate(snap, NOW)]
        second = [a.id for a in engine.evaluate(snap, NOW)]
        assert first == second

    def test_sort_invariant(self) -> None:
        alerts = AlertEngine().evaluate(_snapshot(), NOW)
        seen_warning = False
        for prev, cur in zip(alerts, alerts[1:]):
            if prev.severity == cur.severity:
                assert prev.days_remaining <= cur.days_remaining
        for a in alerts:
            if a.severity == SeverityLevel.WARNING:
                seen_warning = True
            else:
                assert not seen_warning

    def test_all_unread(self) -> None:
        assert all(not a.read for a in AlertEngine().evaluate(_snapshot(), NOW))


class TestConfiguration:
    def test_disabled_kind_filtered(self) -> None:
        engine = AlertEngine(
            enabled_kinds=[k for k in DocumentKind if k != DocumentKind.INVOICE_DUE],
        )
        ids = [a.id for a in engine.evaluate(_snapshot(), NOW)]
        assert "invoice-inv-1-invoice_due" not in ids
        assert "operator-op-1-license" in ids

    def test_custom_collectors(self) -> None:
        engine = AlertEngine(collectors=[PersonnelCollector()])
        alerts = engine.evaluate(_snapshot(), NOW)
        assert {a.entity_type.value for a in alerts} == {"operator"}

    def test_from_settings(self) -> None:
        settings = Settings(
            alerts=AlertsConfig(
                thresholds={
                    DocumentKind.CALENDAR_EVENT: ThresholdPair(warning_days=14, critical_days=2),
                },
                notifications={DocumentKind.MAINTENANCE_SCHEDULE: False},
            ),
        )
        engine = AlertEngine.from_settings(settings)
        alerts = {a.id: a for a in engine.evaluate(_snapshot(), NOW)}
        assert alerts["calendar-ev-1-calendar_event"].severity == SeverityLevel.WARNING
        assert "maintenance-mnt-1-maintenance_schedule" not in alerts
        assert DocumentKind.MAINTENANCE_SCHEDULE not in engine.enabled_kinds

    def test_policy_passed_to_collectors(self) -> None:
        policy = ThresholdPolicy(
            overrides={DocumentKind.LICENSE: ThresholdPair(warning_days=5, critical_days=0)},
        )
        alerts = {a.id: a for a in AlertEngine(policy=policy).evaluate(_snapshot(), NOW)}
        assert alerts["operator-op-1-license"].severity == SeverityLevel.WARNING

    def test_default_collectors_cover_snapshot_sections(self) -> None:
        fields = {c.snapshot_field for c in default_collectors()}
        assert fields == set(FleetSnapshot.model_fields)
