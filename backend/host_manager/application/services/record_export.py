"""CSV export of hosting records, joined with client and platform names."""

import csv
import io
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date

from host_manager.domain.entities import Client, Platform, Record

logger = logging.getLogger(__name__)

CSV_MEDIA_TYPE = "text/csv;charset=utf-8"

CSV_HEADERS = [
    "Date",
    "Client",
    "IP Address",
    "Platform",
    "Renewal Status",
    "Invoice #",
    "Received (₹)",
    "Cost (₹)",
    "Profit (₹)",
    "Payment Status",
]

UNKNOWN_CLIENT = "Unknown Client"
UNKNOWN_PLATFORM = "Unknown Platform"
NOT_AVAILABLE = "N/A"
INVALID_DATE = "Invalid Date"


@dataclass(frozen=True)
class CsvExport:
    """A rendered CSV file ready to be sent as a download."""

    filename: str
    content: str
    media_type: str = CSV_MEDIA_TYPE


class RecordLookup:
    """Resolves display names for a record's client and platform.

    Missing references are not errors; they fall back to placeholder text.
    """

    def __init__(self, clients: Sequence[Client], platforms: Sequence[Platform]):
        self._clients = {c.id: c for c in clients}
        self._platforms = {p.id: p for p in platforms}

    def client_name(self, client_id: str) -> str:
        client = self._clients.get(client_id)
        return client.name if client else UNKNOWN_CLIENT

    def client_ip(self, client_id: str) -> str:
        client = self._clients.get(client_id)
        return client.ip_address if client else NOT_AVAILABLE

    def platform_name(self, client_id: str) -> str:
        client = self._clients.get(client_id)
        if client is None or not client.platform:
            return NOT_AVAILABLE
        platform = self._platforms.get(client.platform)
        return platform.name if platform else UNKNOWN_PLATFORM


def format_short_date(day: date | None) -> str:
    """US short date, e.g. ``10/15/2023``."""
    if day is None:
        return INVALID_DATE
    return f"{day.month}/{day.day}/{day.year}"


def format_amount(value: float) -> str:
    return f"{value:.2f}"


def export_filename(month: int | str, year: int | str) -> str:
    return f"hosting-records-{month}-{year}.csv"


def export_records_csv(
    records: Sequence[Record],
    clients: Sequence[Client],
    platforms: Sequence[Platform],
    month: int | str,
    year: int | str,
    on_success: Callable[[CsvExport], None] | None = None,
) -> CsvExport:
    """Render ``records`` as CSV, one row per record after a header row.

    ``month`` and ``year`` only name the file; pass already-filtered records.
    Fields containing commas, quotes or newlines are quoted.
    """
    lookup = RecordLookup(clients, platforms)

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for record in records:
        writer.writerow([
            format_short_date(record.date),
            lookup.client_name(record.client_id),
            lookup.client_ip(record.client_id),
            lookup.platform_name(record.client_id),
            record.renewal_status.value,
            record.vendor_invoice_number,
            format_amount(record.received_cost),
            format_amount(record.vendor_cost),
            format_amount(record.total_profit),
            record.payment_status.value,
        ])

    export = CsvExport(
        filename=export_filename(month, year),
        content=buffer.getvalue(),
    )
    logger.info("Exported %d records to %s", len(records), export.filename)

    if on_success is not None:
        on_success(export)
    return export
