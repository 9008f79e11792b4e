"""Application service (use case) for Record operations."""

import logging
from datetime import date

from host_manager.application.interfaces import RecordRepository
from host_manager.application.schemas import RecordCreate, RecordUpdate
from host_manager.application.services.change_notifier import ChangeNotifier
from host_manager.application.services.dashboard_statistics import filter_records_by_period
from host_manager.domain.entities import Record
from host_manager.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


def sort_newest_first(records: list[Record]) -> list[Record]:
    """Order by record date, newest first; unparseable dates go last."""
    return sorted(
        records,
        key=lambda r: (r.date is not None, r.date or date.min),
        reverse=True,
    )


class RecordService:
    """Orchestrates record CRUD logic. Depends on the repository port (DI).

    ``total_profit`` is always derived from the two cost fields here;
    callers never set it directly.
    """

    def __init__(self, repository: RecordRepository, notifier: ChangeNotifier | None = None):
        self._repository = repository
        self._notifier = notifier

    async def get_record(self, record_id: str) -> Record:
        record = await self._repository.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError("Record", record_id)
        return record

    async def list_records(
        self,
        *,
        month: int | None = None,
        year: int | None = None,
    ) -> list[Record]:
        """List records, limited to one month when both month and year are given."""
        records = await self._repository.list_all()
        is_filtered = month is not None and year is not None
        records = filter_records_by_period(records, month or 0, year or 0, is_filtered)
        return sort_newest_first(records)

    async def create_record(self, data: RecordCreate) -> Record:
        record = Record(
            client_id=data.client_id,
            date=data.date,
            renewal_status=data.renewal_status,
            vendor_invoice_number=data.vendor_invoice_number,
            received_cost=data.received_cost,
            vendor_cost=data.vendor_cost,
            payment_status=data.payment_status,
        )
        record.recalculate_profit()
        created = await self._repository.create(record)
        logger.info(
            "Created record %s for client %s (profit=%.2f)",
            created.id, created.client_id, created.total_profit,
        )
        await self._notify("created", created.id)
        return created

    async def update_record(self, record_id: str, data: RecordUpdate) -> Record:
        record = await self.get_record(record_id)
        record.update(
            client_id=data.client_id,
            date=data.date,
            renewal_status=data.renewal_status,
            vendor_invoice_number=data.vendor_invoice_number,
            received_cost=data.received_cost,
            vendor_cost=data.vendor_cost,
            payment_status=data.payment_status,
        )
        updated = await self._repository.update(record)
        await self._notify("updated", updated.id)
        return updated

    async def delete_record(self, record_id: str) -> bool:
        exists = await self._repository.get_by_id(record_id)
        if exists is None:
            raise EntityNotFoundError("Record", record_id)
        deleted = await self._repository.delete(record_id)
        logger.info("Deleted record %s", record_id)
        await self._notify("deleted", record_id)
        return deleted

    async def _notify(self, action: str, record_id: str) -> None:
        if self._notifier is not None:
            await self._notifier.broadcast("records", action, record_id)
