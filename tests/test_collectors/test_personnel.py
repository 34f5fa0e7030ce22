"""Tests for the personnel (operator) collector."""

from __future__ import annotations

from datetime import datetime, timedelta

from fleetwatch.collectors.personnel import PersonnelCollector
from fleetwatch.collectors.types import OperatorSnapshot
from fleetwatch.core.types import DocumentKind, EntityType, SeverityLevel

NOW = datetime(2025, 6, 1, 9, 30)
TODAY = NOW.date()


def _operator(**kw: object) -> OperatorSnapshot:
    defaults: dict[str, object] = {"id": "op-1", "name": "Juan Pérez"}
    defaults.update(kw)
    return OperatorSnapshot(**defaults)  # type: ignore[arg-type]


class TestPersonnelCollector:
    def test_license_in_five_days(self) -> None:
        op = _operator(license_expiry=TODAY + timedelta(days=5))
        alerts = PersonnelCollector().collect(op, NOW)
        assert len(alerts) == 1
        alert = alerts[0]
        assert alert.document_kind == DocumentKind.LICENSE
        assert alert.entity_type == EntityType.OPERATOR
        assert alert.entity_name == "Juan Pérez"
        assert alert.severity == SeverityLevel.CRITICAL
        assert alert.days_remaining == 5
        assert alert.id == "operator-op-1-license"

    def test_all_three_documents(self) -> None:
        op = _operator(
            license_expiry=TODAY + timedelta(days=20),
            occupational_exam_expiry=TODAY - timedelta(days=2),
            psychosensometric_exam_expiry=TODAY + timedelta(days=3),
        )
        alerts = PersonnelCollector().collect(op, NOW)
        assert [a.document_kind for a in alerts] == [
            DocumentKind.LICENSE,
            DocumentKind.OCCUPATIONAL_EXAM,
            DocumentKind.PSYCHOSENSOMETRIC_EXAM,
        ]
        assert [a.severity for a in alerts] == [
            SeverityLevel.WARNING,
            SeverityLevel.CRITICAL,
            SeverityLevel.CRITICAL,
        ]

    def test_missing_dates_produce_nothing(self) -> None:
        assert PersonnelCollector().collect(_operator(), NOW) == []

    def test_far_future_produces_nothing(self) -> None:
        op = _operator(license_expiry=TODAY + timedelta(days=365))
        assert PersonnelCollector().collect(op, NOW) == []

    def test_collect_all_keeps_input_order(self) -> None:
        ops = [
            _operator(id="a", license_expiry=TODAY + timedelta(days=10)),
            _operator(id="b"),
            _operator(id="c", license_expiry=TODAY + timedelta(days=1)),
        ]
        alerts = PersonnelCollector().collect_all(ops, NOW)
        assert [a.entity_id for a in alerts] == ["a", "c"]

    def test_numeric_id_coerced(self) -> None:
        op = OperatorSnapshot(id=7, name="Pedro", license_expiry=TODAY)  # type: ignore[arg-type]
        alerts = PersonnelCollector().collect(op, NOW)
        assert alerts[0].id == "operator-7-license"
