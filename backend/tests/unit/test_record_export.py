"""Unit tests for the CSV record export."""

import csv
import io
from datetime import date

from host_manager.application.services.demo_data import (
    demo_clients,
    demo_platforms,
    demo_records,
)
from host_manager.application.services.record_export import (
    CSV_HEADERS,
    CSV_MEDIA_TYPE,
    CsvExport,
    export_filename,
    export_records_csv,
    format_short_date,
)
from host_manager.domain.entities import Client, PaymentStatus, Record, RenewalStatus


def _rows(export: CsvExport) -> list[list[str]]:
    return list(csv.reader(io.StringIO(export.content)))


def test_header_row_comes_first():
    export = export_records_csv([], [], [], 10, 2023)
    assert _rows(export) == [CSV_HEADERS]
    assert export.content.startswith('Date,Client,IP Address,Platform,Renewal Status,Invoice #,')
    assert "Received (₹),Cost (₹),Profit (₹),Payment Status" in export.content


def test_one_row_per_record():
    export = export_records_csv(demo_records(), demo_clients(), demo_platforms(), 10, 2023)
    rows = _rows(export)
    assert len(rows) == 3
    assert rows[1] == [
        "10/15/2023",
        "Client One",
        "192.168.1.1",
        "Hostcode",
        "Renewed",
        "INV-2023-001",
        "8400.00",
        "5600.00",
        "2800.00",
        "Paid",
    ]
    assert rows[2][3] == "Serverlize"
    assert rows[2][9] == "Pending"


def test_missing_client_uses_placeholders():
    record = demo_records()[0]
    record.client_id = "gone"
    rows = _rows(export_records_csv([record], demo_clients(), demo_platforms(), 1, 2024))
    assert rows[1][1:4] == ["Unknown Client", "N/A", "N/A"]


def test_client_without_platform_shows_not_available():
    clients = [Client(id="client1", name="Client One", ip_address="10.0.0.1")]
    rows = _rows(export_records_csv(demo_records()[:1], clients, demo_platforms(), 1, 2024))
    assert rows[1][3] == "N/A"


def test_unknown_platform_reference():
    clients = [Client(id="client1", name="Client One", platform="platform9")]
    rows = _rows(export_records_csv(demo_records()[:1], clients, demo_platforms(), 1, 2024))
    assert rows[1][3] == "Unknown Platform"


def test_fields_with_commas_are_quoted():
    clients = [Client(id="client1", name="Acme, Inc.", ip_address="10.0.0.1", platform="platform1")]
    export = export_records_csv(demo_records()[:1], clients, demo_platforms(), 1, 2024)
    assert '"Acme, Inc."' in export.content
    assert _rows(export)[1][1] == "Acme, Inc."


def test_invalid_date_is_rendered_as_text():
    record = Record(
        client_id="client1",
        date=None,
        renewal_status=RenewalStatus.RENEWED,
        vendor_invoice_number="INV-X",
        received_cost=10,
        vendor_cost=4,
        payment_status=PaymentStatus.PAID,
    )
    record.recalculate_profit()
    rows = _rows(export_records_csv([record], demo_clients(), demo_platforms(), 1, 2024))
    assert rows[1][0] == "Invalid Date"
    assert rows[1][8] == "6.00"


def test_filename_and_media_type():
    export = export_records_csv([], [], [], 10, 2023)
    assert export.filename == "hosting-records-10-2023.csv"
    assert export.media_type == CSV_MEDIA_TYPE
    assert export_filename("all", "all") == "hosting-records-all-all.csv"


def test_on_success_receives_the_export():
    received: list[CsvExport] = []
    export = export_records_csv(demo_records(), demo_clients(), demo_platforms(), 10, 2023, received.append)
    assert received == [export]


def test_short_date_has_no_zero_padding():
    assert format_short_date(date(2024, 3, 5)) == "3/5/2024"
