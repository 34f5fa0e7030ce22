"""Per-category collectors that extract tracked dates from entity snapshots."""

from fleetwatch.collectors.base import Collector
from fleetwatch.collectors.financial import InvoiceCollector
from fleetwatch.collectors.fleet import FleetAssetCollector
from fleetwatch.collectors.maintenance import MaintenanceCollector
from fleetwatch.collectors.personnel import PersonnelCollector
from fleetwatch.collectors.schedule import CalendarEventCollector
from fleetwatch.collectors.service import ServiceDeadlineCollector
from fleetwatch.collectors.snapshot import FleetSnapshot, load_snapshot, parse_snapshot
from fleetwatch.collectors.types import (
    CalendarEventSnapshot,
    EventStatus,
    EventType,
    InvoiceSnapshot,
    InvoiceStatus,
    MaintenanceSnapshot,
    OperatorSnapshot,
    ServiceSnapshot,
    ServiceStatus,
    TowTruckSnapshot,
    TowTruckStatus,
)

__all__ = [
    "CalendarEventCollector",
    "CalendarEventSnapshot",
    "Collector",
    "EventStatus",
    "EventType",
    "FleetAssetCollector",
    "FleetSnapshot",
    "InvoiceCollector",
    "InvoiceSnapshot",
    "InvoiceStatus",
    "MaintenanceCollector",
    "MaintenanceSnapshot",
    "OperatorSnapshot",
    "PersonnelCollector",
    "ServiceDeadlineCollector",
    "ServiceSnapshot",
    "ServiceStatus",
    "TowTruckSnapshot",
    "TowTruckStatus",
    "load_snapshot",
    "parse_snapshot",
]
