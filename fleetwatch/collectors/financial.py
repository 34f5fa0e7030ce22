"""Financial-document collector — invoice due dates."""

from __future__ import annotations

from fleetwatch.collectors.base import Collector, TrackedDate
from fleetwatch.collectors.types import InvoiceSnapshot, InvoiceStatus
from fleetwatch.core.types import DocumentKind, EntityType


class InvoiceCollector(Collector[InvoiceSnapshot]):
    """Paid and cancelled invoices never alert, whatever their due date."""

    entity_type = EntityType.INVOICE
    snapshot_field = "invoices"
    terminal_statuses = frozenset({InvoiceStatus.PAID, InvoiceStatus.CANCELLED})

    def entity_name(self, entity: InvoiceSnapshot) -> str:
        return entity.invoice_number

    def tracked_dates(self, entity: InvoiceSnapshot) -> list[TrackedDate]:
        return [(DocumentKind.INVOICE_DUE, entity.due_date)]
