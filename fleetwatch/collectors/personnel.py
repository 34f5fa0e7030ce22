"""Personnel collector — operator licenses and medical exams."""

from __future__ import annotations

from fleetwatch.collectors.base import Collector, TrackedDate
from fleetwatch.collectors.types import OperatorSnapshot
from fleetwatch.core.types import DocumentKind, EntityType


class PersonnelCollector(Collector[OperatorSnapshot]):
    """Operator records are always monitored; there is no lifecycle gate."""

    entity_type = EntityType.OPERATOR
    snapshot_field = "operators"

    def entity_name(self, entity: OperatorSnapshot) -> str:
        return entity.name

    def tracked_dates(self, entity: OperatorSnapshot) -> list[TrackedDate]:
        return [
            (DocumentKind.LICENSE, entity.license_expiry),
            (DocumentKind.OCCUPATIONAL_EXAM, entity.occupational_exam_expiry),
            (DocumentKind.PSYCHOSENSOMETRIC_EXAM, entity.psychosensometric_exam_expiry),
        ]
