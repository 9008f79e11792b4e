"""Pydantic DTOs (Data Transfer Objects) for the Record feature."""

import datetime as dt
import math

from pydantic import BaseModel, Field, field_serializer

from host_manager.domain.entities import PaymentStatus, RenewalStatus


class RecordCreate(BaseModel):
    """Schema for creating a new record.

    ``total_profit`` is not accepted; it is derived from the two costs.
    """

    client_id: str = Field(..., min_length=1, max_length=36)
    date: dt.date
    renewal_status: RenewalStatus = RenewalStatus.RENEWED
    vendor_invoice_number: str = Field(
        ..., min_length=1, max_length=100, examples=["INV-2023-001"],
    )
    received_cost: float = Field(..., ge=0, examples=[8400])
    vendor_cost: float = Field(..., ge=0, examples=[5600])
    payment_status: PaymentStatus = PaymentStatus.PENDING


class RecordUpdate(BaseModel):
    """Schema for updating an existing record — all fields optional."""

    client_id: str | None = Field(None, min_length=1, max_length=36)
    date: dt.date | None = None
    renewal_status: RenewalStatus | None = None
    vendor_invoice_number: str | None = Field(None, min_length=1, max_length=100)
    received_cost: float | None = Field(None, ge=0)
    vendor_cost: float | None = Field(None, ge=0)
    payment_status: PaymentStatus | None = None


class RecordResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    client_id: str
    date: dt.date | None
    renewal_status: RenewalStatus
    vendor_invoice_number: str
    received_cost: float
    vendor_cost: float
    total_profit: float
    payment_status: PaymentStatus
    created_at: dt.datetime

    model_config = {"from_attributes": True}

    @field_serializer("received_cost", "vendor_cost", "total_profit")
    def _finite_or_null(self, value: float) -> float | None:
        # NaN marks a stored amount that could not be read
        return value if math.isfinite(value) else None
