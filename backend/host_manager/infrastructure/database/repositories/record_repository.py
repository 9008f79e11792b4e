"""Concrete repository implementation for Record backed by SQLAlchemy."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from host_manager.application.conversion import parse_payment_status, parse_renewal_status
from host_manager.application.interfaces import RecordRepository
from host_manager.domain.entities import Record
from host_manager.domain.exceptions import RecordParseError
from host_manager.infrastructure.database.models import RecordModel

logger = logging.getLogger(__name__)


class SQLAlchemyRecordRepository(RecordRepository):
    """Implements the RecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: RecordModel) -> Record:
        """Map ORM model → domain entity.

        Raises RecordParseError if a status column holds an unknown value.
        """
        return Record(
            id=model.id,
            client_id=model.client_id,
            date=model.date,
            renewal_status=parse_renewal_status(model.renewal_status),
            vendor_invoice_number=model.vendor_invoice_number,
            received_cost=model.received_cost,
            vendor_cost=model.vendor_cost,
            total_profit=model.total_profit,
            payment_status=parse_payment_status(model.payment_status),
            created_at=model.created_at,
        )

    def _apply(self, model: RecordModel, entity: Record) -> None:
        """Copy mutable fields from the domain entity onto the ORM model."""
        model.client_id = entity.client_id
        model.date = entity.date
        model.renewal_status = entity.renewal_status.value
        model.vendor_invoice_number = entity.vendor_invoice_number
        model.received_cost = entity.received_cost
        model.vendor_cost = entity.vendor_cost
        model.total_profit = entity.total_profit
        model.payment_status = entity.payment_status.value

    async def get_by_id(self, entity_id: str) -> Record | None:
        result = await self._session.get(RecordModel, entity_id)
        return self._to_entity(result) if result else None

    async def list_all(self) -> list[Record]:
        stmt = select(RecordModel).order_by(RecordModel.date.desc(), RecordModel.created_at.desc())
        result = await self._session.execute(stmt)
        records: list[Record] = []
        for row in result.scalars().all():
            try:
                records.append(self._to_entity(row))
            except RecordParseError as exc:
                logger.warning("Skipping unreadable record row %s: %s", row.id, exc)
        return records

    async def create(self, entity: Record) -> Record:
        model = RecordModel(id=entity.id, created_at=entity.created_at)
        self._apply(model, entity)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, entity: Record) -> Record:
        model = await self._session.get(RecordModel, entity.id)
        if model is None:
            raise ValueError(f"Record {entity.id} not found in database")
        self._apply(model, entity)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, entity_id: str) -> bool:
        model = await self._session.get(RecordModel, entity_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
