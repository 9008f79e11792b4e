"""Application service for the derived views: dashboard stats, pending payments, CSV export."""

import logging

from host_manager.application.interfaces import (
    ClientRepository,
    PlatformRepository,
    RecordRepository,
)
from host_manager.application.services.dashboard_statistics import (
    calculate_dashboard_stats,
    filter_records_by_period,
    get_pending_payments,
)
from host_manager.application.services.record_export import CsvExport, export_records_csv
from host_manager.application.services.record_service import sort_newest_first
from host_manager.domain.entities import DashboardStats, Record, ReportingPeriod

logger = logging.getLogger(__name__)


class DashboardService:
    """Loads full entity lists and derives views from them on every call.

    Nothing computed here is cached or written back to the store.
    """

    def __init__(
        self,
        records: RecordRepository,
        clients: ClientRepository,
        platforms: PlatformRepository,
    ):
        self._records = records
        self._clients = clients
        self._platforms = platforms

    async def get_stats(self, period: ReportingPeriod | None = None) -> tuple[ReportingPeriod, DashboardStats]:
        """Stats for ``period``, defaulting to the current month."""
        period = period or ReportingPeriod.current()
        records = await self._records.list_all()
        clients = await self._clients.list_all()
        stats = calculate_dashboard_stats(records, clients, period)
        logger.debug("Dashboard stats for %d-%02d: %s", period.year, period.month, stats)
        return period, stats

    async def get_pending_payments(self) -> list[Record]:
        records = await self._records.list_all()
        return sort_newest_first(get_pending_payments(records))

    async def export_csv(self, month: int | None = None, year: int | None = None) -> CsvExport:
        """Export records as CSV, limited to one month when both month and year are given."""
        is_filtered = month is not None and year is not None
        records = sort_newest_first(filter_records_by_period(
            await self._records.list_all(), month or 0, year or 0, is_filtered,
        ))
        clients = await self._clients.list_all()
        platforms = await self._platforms.list_all()
        if is_filtered:
            return export_records_csv(records, clients, platforms, month, year)
        return export_records_csv(records, clients, platforms, "all", "all")
