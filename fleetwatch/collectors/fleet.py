"""Fleet-asset collector — tow truck compliance documents."""

from __future__ import annotations

from fleetwatch.collectors.base import Collector, TrackedDate
from fleetwatch.collectors.types import TowTruckSnapshot
from fleetwatch.core.types import DocumentKind, EntityType


class FleetAssetCollector(Collector[TowTruckSnapshot]):
    """Tow trucks stay monitored in every status, including out of service."""

    entity_type = EntityType.TOW_TRUCK
    snapshot_field = "tow_trucks"

    def entity_name(self, entity: TowTruckSnapshot) -> str:
        return entity.name

    def tracked_dates(self, entity: TowTruckSnapshot) -> list[TrackedDate]:
        return [
            (DocumentKind.CIRCULATION_PERMIT, entity.circulation_permit_expiry),
            (DocumentKind.SOAP_INSURANCE, entity.soap_expiry),
            (DocumentKind.TECHNICAL_REVIEW, entity.technical_review_expiry),
        ]
