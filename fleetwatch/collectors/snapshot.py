"""Fleet snapshot container and a YAML/JSON loader for it."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError

from fleetwatch.collectors.types import (
    CalendarEventSnapshot,
    EntitySnapshot,
    InvoiceSnapshot,
    MaintenanceSnapshot,
    OperatorSnapshot,
    ServiceSnapshot,
    TowTruckSnapshot,
)

logger = structlog.get_logger(__name__)


class FleetSnapshot(BaseModel):
    """Point-in-time view of every entity category the engine scans."""

    operators: list[OperatorSnapshot] = Field(default_factory=list)
    tow_trucks: list[TowTruckSnapshot] = Field(default_factory=list)
    invoices: list[InvoiceSnapshot] = Field(default_factory=list)
    calendar_events: list[CalendarEventSnapshot] = Field(default_factory=list)
    services: list[ServiceSnapshot] = Field(default_factory=list)
    maintenance: list[MaintenanceSnapshot] = Field(default_factory=list)

    @property
    def entity_count(self) -> int:
        return sum(
            len(getattr(self, name)) for name in type(self).model_fields
        )


_RECORD_MODELS: dict[str, type[EntitySnapshot]] = {
    "operators": OperatorSnapshot,
    "tow_trucks": TowTruckSnapshot,
    "invoices": InvoiceSnapshot,
    "calendar_events": CalendarEventSnapshot,
    "services": ServiceSnapshot,
    "maintenance": MaintenanceSnapshot,
}


def _validate_records(
    section: str,
    model: type[EntitySnapshot],
    records: Iterable[Any],
) -> list[EntitySnapshot]:
    valid: list[EntitySnapshot] = []
    for index, record in enumerate(records):
        try:
            valid.append(model.model_validate(record))
        except ValidationError as exc:
            logger.warning(
                "snapshot_record_invalid",
                section=section,
                index=index,
                errors=exc.error_count(),
                detail=str(exc).splitlines()[0],
            )
    return valid


def parse_snapshot(data: dict[str, Any]) -> FleetSnapshot:
    """Build a FleetSnapshot, dropping records that fail validation."""
    sections: dict[str, list[EntitySnapshot]] = {}
    for section, model in _RECORD_MODELS.items():
        records = data.get(section) or []
        if not isinstance(records, list):
            logger.warning("snapshot_section_invalid", section=section)
            continue
        sections[section] = _validate_records(section, model, records)
    return FleetSnapshot(**sections)


def load_snapshot(path: str | Path) -> FleetSnapshot:
    """Read a fleet snapshot from a YAML (or JSON) file.

    Args:
        path: File with top-level lists keyed by section name
            (``operators``, ``tow_trucks``, ``invoices``, ...).

    Returns:
        Parsed FleetSnapshot. A missing or empty file yields an empty one.
    """
    snapshot_path = Path(path)
    data: dict[str, Any] = {}
    if snapshot_path.exists():
        with open(snapshot_path) as f:
            raw = yaml.safe_load(f)
            if isinstance(raw, dict):
                data = raw

    snapshot = parse_snapshot(data)
    logger.info(
        "snapshot_loaded",
        path=str(snapshot_path),
        entities=snapshot.entity_count,
    )
    return snapshot
