"""SQLAlchemy ORM model for the Record entity."""

import datetime as dt

from sqlalchemy import Date, DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from host_manager.infrastructure.database.base import Base


class RecordModel(Base):
    """ORM model — maps to the 'records' table.

    Statuses are stored as plain strings and validated when mapped back to
    the domain. ``client_id`` is not a foreign key so records outlive their
    client.
    """

    __tablename__ = "records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_id: Mapped[str] = mapped_column(String(36), nullable=False)
    date: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    renewal_status: Mapped[str] = mapped_column(String(20), nullable=False)
    vendor_invoice_number: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    received_cost: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    vendor_cost: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    total_profit: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    payment_status: Mapped[str] = mapped_column(String(20), nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: dt.datetime.now(dt.timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_records_client", "client_id"),
        Index("ix_records_date", "date"),
    )

    def __repr__(self) -> str:
        return (
            f"<RecordModel(id={self.id}, client={self.client_id}, "
            f"date={self.date}, status='{self.renewal_status}')>"
        )
