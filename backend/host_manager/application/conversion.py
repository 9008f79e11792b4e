"""Mapping between the stored/wire representation and domain entities.

The wire shape is a flat snake_case dict with ISO-8601 strings for dates
and plain strings for statuses, e.g.::

    {
        "id": "...",
        "client_id": "...",
        "date": "2023-10-15",
        "renewal_status": "Renewed",
        "vendor_invoice_number": "INV-2023-001",
        "received_cost": 8400,
        "vendor_cost": 5600,
        "total_profit": 2800,
        "payment_status": "Paid",
        "created_at": "2023-10-15T09:30:00+00:00",
    }

All functions are pure. Status strings are validated and raise
``RecordParseError``; a malformed date becomes ``None`` and a malformed
number becomes ``NaN`` so that one bad row does not hide the rest.
"""

import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any

from host_manager.domain.entities import (
    Client,
    PaymentStatus,
    Platform,
    Record,
    RenewalStatus,
)
from host_manager.domain.exceptions import RecordParseError


# ── Field parsers ────────────────────────────────────────────────────

def parse_date(value: Any) -> date | None:
    """Parse an ISO-8601 date or timestamp. Returns None when unparseable."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def parse_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return math.nan


def parse_renewal_status(value: Any) -> RenewalStatus:
    try:
        return RenewalStatus(value)
    except ValueError:
        raise RecordParseError("renewal_status", value) from None


def parse_payment_status(value: Any) -> PaymentStatus:
    try:
        return PaymentStatus(value)
    except ValueError:
        raise RecordParseError("payment_status", value) from None


def _parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
    return datetime.now(timezone.utc)


def _require(wire: Mapping[str, Any], key: str) -> Any:
    if key not in wire or wire[key] is None:
        raise RecordParseError(key, None)
    return wire[key]


# ── Record ───────────────────────────────────────────────────────────

def to_domain_record(wire: Mapping[str, Any]) -> Record:
    """Map a wire record → domain Record."""
    return Record(
        id=str(_require(wire, "id")),
        client_id=str(_require(wire, "client_id")),
        date=parse_date(wire.get("date")),
        renewal_status=parse_renewal_status(wire.get("renewal_status")),
        vendor_invoice_number=wire.get("vendor_invoice_number") or "",
        received_cost=parse_number(wire.get("received_cost")),
        vendor_cost=parse_number(wire.get("vendor_cost")),
        total_profit=parse_number(wire.get("total_profit")),
        payment_status=parse_payment_status(wire.get("payment_status")),
        created_at=_parse_timestamp(wire.get("created_at")),
    )


def to_wire_record(record: Record) -> dict[str, Any]:
    """Map a domain Record → wire record."""
    return {
        "id": record.id,
        "client_id": record.client_id,
        "date": record.date.isoformat() if record.date is not None else None,
        "renewal_status": record.renewal_status.value,
        "vendor_invoice_number": record.vendor_invoice_number,
        "received_cost": record.received_cost,
        "vendor_cost": record.vendor_cost,
        "total_profit": record.total_profit,
        "payment_status": record.payment_status.value,
        "created_at": record.created_at.isoformat(),
    }


# ── Client ───────────────────────────────────────────────────────────

def to_domain_client(wire: Mapping[str, Any]) -> Client:
    """Map a wire client → domain Client. Null optional fields become ''."""
    return Client(
        id=str(_require(wire, "id")),
        name=wire.get("name") or "",
        ip_address=wire.get("ip_address") or "",
        platform=wire.get("platform") or "",
        created_at=_parse_timestamp(wire.get("created_at")),
    )


def to_wire_client(client: Client) -> dict[str, Any]:
    """Map a domain Client → wire client. Only an empty platform is written as null."""
    return {
        "id": client.id,
        "name": client.name,
        "ip_address": client.ip_address,
        "platform": client.platform or None,
        "created_at": client.created_at.isoformat(),
    }


# ── Platform ─────────────────────────────────────────────────────────

def to_domain_platform(wire: Mapping[str, Any]) -> Platform:
    return Platform(
        id=str(_require(wire, "id")),
        name=wire.get("name") or "",
        created_at=_parse_timestamp(wire.get("created_at")),
    )


def to_wire_platform(platform: Platform) -> dict[str, Any]:
    return {
        "id": platform.id,
        "name": platform.name,
        "created_at": platform.created_at.isoformat(),
    }
