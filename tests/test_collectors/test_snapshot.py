"""Tests for fleet snapshot parsing and loading."""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path

from fleetwatch.collectors.snapshot import FleetSnapshot, load_snapshot, parse_snapshot
from fleetwatch.collectors.types import InvoiceStatus


class TestParseSnapshot:
    def test_empty(self) -> None:
        snap = parse_snapshot({})
        assert snap == FleetSnapshot()
        assert snap.entity_count == 0

    def test_all_sections(self) -> None:
        snap = parse_snapshot({
            "operators": [{"id": "op-1", "name": "Juan", "license_expiry": "2025-06-05"}],
            "tow_trucks": [{"id": "gr-1", "name": "Grúa 1", "soap_expiry": None}],
            "invoices": [{"id": 12, "invoice_number": "F-1", "status": "paid"}],
            "calendar_events": [{"id": "ev-1", "title": "Meet", "start": "2025-06-02T10:00:00"}],
            "services": [{"id": "s-1", "service_number": "SRV-1", "service_date": "2025-06-02"}],
            "maintenance": [{"id": "m-1", "tow_truck_name": "Grúa 1"}],
        })
        assert snap.entity_count == 6
        assert snap.operators[0].license_expiry == date(2025, 6, 5)
        assert snap.invoices[0].id == "12"
        assert snap.invoices[0].status == InvoiceStatus.PAID
        assert snap.calendar_events[0].start == datetime(2025, 6, 2, 10, 0)

    def test_invalid_records_skipped(self) -> None:
        snap = parse_snapshot({
            "operators": [
                {"id": "op-1", "name": "Ok"},
                {"id": "op-2"},
                {"id": "op-3", "name": "Bad date", "license_expiry": "not-a-date"},
            ],
            "invoices": [{"id": "inv-1", "invoice_number": "F-1", "status": "lost"}],
        })
        assert [op.id for op in snap.operators] == ["op-1"]
        assert snap.invoices == []

    def test_non_list_section_ignored(self) -> None:
        snap = parse_snapshot({"operators": {"id": "op-1"}, "tow_trucks": None})
        assert snap.operators == []
        assert snap.tow_trucks == []

    def test_extra_fields_ignored(self) -> None:
        snap = parse_snapshot({
            "tow_trucks": [{"id": "gr-1", "name": "Grúa 1", "capacity_tons": 8, "brand": "Volvo"}],
        })
        assert snap.tow_trucks[0].name == "Grúa 1"


class TestLoadSnapshot:
    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "fleet.yaml"
        path.write_text(
            "operators:\n"
            "  - id: op-1\n"
            "    name: Juan\n"
            "    license_expiry: 2025-06-05\n"
            "calendar_events:\n"
            "  - id: ev-1\n"
            "    title: Meet\n"
            "    start: 2025-06-02 10:00:00\n"
        )
        snap = load_snapshot(path)
        assert snap.operators[0].license_expiry == date(2025, 6, 5)
        assert snap.calendar_events[0].start == datetime(2025, 6, 2, 10, 0)

    def test_json_file(self, tmp_path: Path) -> None:
        path = tmp_path / "fleet.json"
        path.write_text(json.dumps({
            "invoices": [{"id": "inv-1", "invoice_number": "F-1", "due_date": "2025-05-31"}],
        }))
        snap = load_snapshot(path)
        assert snap.invoices[0].due_date == date(2025, 5, 31)

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert load_snapshot(tmp_path / "nope.yaml").entity_count == 0

    def test_non_mapping_file_is_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "fleet.yaml"
        path.write_text("- just\n- a list\n")
        assert load_snapshot(path).entity_count == 0
