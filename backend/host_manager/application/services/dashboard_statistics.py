"""Dashboard aggregation over in-memory record lists.

Pure functions: no I/O, deterministic for a given input.
"""

import math
from collections.abc import Iterable, Sequence

from host_manager.domain.entities import (
    Client,
    DashboardStats,
    PaymentStatus,
    Record,
    RenewalStatus,
    ReportingPeriod,
)


def round_percentage(value: float) -> float:
    """Round to 2 decimals, halves rounded towards positive infinity."""
    if not math.isfinite(value):
        return value
    return math.floor(value * 100 + 0.5) / 100


def _records_in(records: Iterable[Record], period: ReportingPeriod) -> list[Record]:
    return [r for r in records if period.contains(r.date)]


def calculate_dashboard_stats(
    records: Sequence[Record],
    clients: Sequence[Client],
    period: ReportingPeriod,
) -> DashboardStats:
    """Compute the dashboard figures for ``period``.

    Revenue, profit and the two percentages only look at records dated in
    ``period`` (and the month before it, for growth). ``active_clients``
    counts distinct clients with any Renewed record across *all* of
    ``records`` and does not depend on ``period``.

    ``clients`` is part of the signature so callers pass the same inputs the
    dashboard renders from; the figures are derived from records alone.
    """
    selected = _records_in(records, period)
    previous = _records_in(records, period.previous())

    monthly_revenue = sum(r.received_cost for r in selected)
    monthly_profit = sum(r.total_profit for r in selected)

    avg_profit_percentage = 0.0
    if monthly_revenue > 0:
        avg_profit_percentage = monthly_profit / monthly_revenue * 100

    previous_revenue = sum(r.received_cost for r in previous)
    growth_percentage = 0.0
    if previous_revenue > 0:
        growth_percentage = (monthly_revenue - previous_revenue) / previous_revenue * 100

    active_clients = {
        r.client_id for r in records if r.renewal_status == RenewalStatus.RENEWED
    }

    return DashboardStats(
        active_clients=len(active_clients),
        monthly_revenue=monthly_revenue,
        monthly_profit=monthly_profit,
        avg_profit_percentage=round_percentage(avg_profit_percentage),
        growth_percentage=round_percentage(growth_percentage),
    )


def filter_records_by_period(
    records: Sequence[Record],
    month: int,
    year: int,
    is_filtered: bool = True,
) -> list[Record]:
    """Keep records dated in ``month`` (1-12) of ``year``.

    With ``is_filtered=False`` the records are returned unfiltered.
    """
    if not is_filtered:
        return list(records)
    return [
        r for r in records
        if r.date is not None and r.date.month == month and r.date.year == year
    ]


def get_pending_payments(records: Iterable[Record]) -> list[Record]:
    """Records that were renewed but not yet paid."""
    return [
        r for r in records
        if r.payment_status == PaymentStatus.PENDING
        and r.renewal_status == RenewalStatus.RENEWED
    ]
