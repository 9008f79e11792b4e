"""Domain entity for monthly renewal / billing records."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from uuid import uuid4


class RenewalStatus(str, Enum):
    """Whether the client renewed hosting for the period."""

    RENEWED = "Renewed"
    CANCELED = "Canceled"


class PaymentStatus(str, Enum):
    """Whether the client has paid for the period."""

    PAID = "Paid"
    PENDING = "Pending"


@dataclass
class Record:
    """A single renewal / billing entry for a client.

    ``date`` is ``None`` when the stored value could not be parsed; such
    records never match a reporting period.
    ``total_profit`` is derived from the two cost fields, see
    :meth:`recalculate_profit`.
    """

    client_id: str
    date: date | None
    renewal_status: RenewalStatus
    vendor_invoice_number: str
    received_cost: float
    vendor_cost: float
    payment_status: PaymentStatus
    total_profit: float = 0.0
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def recalculate_profit(self) -> None:
        self.total_profit = self.received_cost - self.vendor_cost

    def update(
        self,
        client_id: str | None = None,
        date: date | None = None,
        renewal_status: RenewalStatus | None = None,
        vendor_invoice_number: str | None = None,
        received_cost: float | None = None,
        vendor_cost: float | None = None,
        payment_status: PaymentStatus | None = None,
    ) -> None:
        """Update mutable fields; profit is recomputed when a cost changes."""
        if client_id is not None:
            self.client_id = client_id
        if date is not None:
            self.date = date
        if renewal_status is not None:
            self.renewal_status = renewal_status
        if vendor_invoice_number is not None:
            self.vendor_invoice_number = vendor_invoice_number
        if payment_status is not None:
            self.payment_status = payment_status

        costs_changed = False
        if received_cost is not None:
            self.received_cost = received_cost
            costs_changed = True
        if vendor_cost is not None:
            self.vendor_cost = vendor_cost
            costs_changed = True
        if costs_changed:
            self.recalculate_profit()
