"""Unit tests for wire ↔ domain conversion."""

import math
from datetime import date

import pytest

from host_manager.application.conversion import (
    to_domain_client,
    to_domain_platform,
    to_domain_record,
    to_wire_client,
    to_wire_platform,
    to_wire_record,
)
from host_manager.domain.entities import PaymentStatus, RenewalStatus
from host_manager.domain.exceptions import RecordParseError


def _wire_record(**overrides) -> dict:
    wire = {
        "id": "1",
        "client_id": "client1",
        "date": "2023-10-15",
        "renewal_status": "Renewed",
        "vendor_invoice_number": "INV-2023-001",
        "received_cost": 8400,
        "vendor_cost": 5600,
        "total_profit": 2800,
        "payment_status": "Paid",
        "created_at": "2023-10-15T09:30:00+00:00",
    }
    wire.update(overrides)
    return wire


# ── Records ──────────────────────────────────────────────────────────

def test_to_domain_record_parses_types():
    record = to_domain_record(_wire_record())
    assert record.date == date(2023, 10, 15)
    assert record.renewal_status is RenewalStatus.RENEWED
    assert record.payment_status is PaymentStatus.PAID
    assert record.received_cost == 8400.0
    assert isinstance(record.received_cost, float)
    assert record.total_profit == 2800.0


def test_record_round_trip():
    wire = _wire_record()
    assert to_wire_record(to_domain_record(wire)) == wire


def test_numeric_strings_are_coerced():
    record = to_domain_record(_wire_record(received_cost="10500.50"))
    assert record.received_cost == 10500.5


def test_timestamp_date_is_reduced_to_calendar_date():
    record = to_domain_record(_wire_record(date="2023-10-18T00:00:00.000Z"))
    assert record.date == date(2023, 10, 18)


def test_malformed_date_becomes_none():
    record = to_domain_record(_wire_record(date="not-a-date"))
    assert record.date is None
    assert to_wire_record(record)["date"] is None


def test_malformed_number_becomes_nan():
    record = to_domain_record(_wire_record(vendor_cost="abc"))
    assert math.isnan(record.vendor_cost)


@pytest.mark.parametrize("field", ["renewal_status", "payment_status"])
def test_unknown_status_raises(field):
    with pytest.raises(RecordParseError) as exc_info:
        to_domain_record(_wire_record(**{field: "Expired"}))
    assert exc_info.value.field == field
    assert exc_info.value.value == "Expired"


def test_missing_id_raises():
    wire = _wire_record()
    del wire["id"]
    with pytest.raises(RecordParseError):
        to_domain_record(wire)


# ── Clients & platforms ──────────────────────────────────────────────

def test_client_null_optionals_default_to_empty_string():
    client = to_domain_client({"id": "c1", "name": "Acme", "ip_address": None, "platform": None})
    assert client.ip_address == ""
    assert client.platform == ""


def test_client_to_wire_maps_empty_platform_to_none():
    client = to_domain_client({"id": "c1", "name": "Acme", "ip_address": "10.0.0.1"})
    wire = to_wire_client(client)
    assert wire["ip_address"] == "10.0.0.1"
    assert wire["platform"] is None


def test_platform_round_trip():
    wire = {"id": "platform1", "name": "Hostcode", "created_at": "2024-01-01T00:00:00+00:00"}
    assert to_wire_platform(to_domain_platform(wire)) == wire


def test_client_to_wire_keeps_empty_ip_address_as_string():
    wire = to_wire_client(to_domain_client({"id": "c1", "name": "Acme", "ip_address": None}))
    assert wire["ip_address"] == ""
    assert wire["platform"] is None
