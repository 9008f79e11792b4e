"""Dashboard endpoints — derived statistics and pending payments."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from host_manager.application.schemas import DashboardStatsResponse, RecordResponse
from host_manager.application.services import DashboardService
from host_manager.domain.entities import ReportingPeriod
from host_manager.infrastructure.dependencies import get_dashboard_service

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_stats(
    month: int | None = Query(None, ge=1, le=12, description="Reporting month, defaults to the current one"),
    year: int | None = Query(None, ge=1, le=9999, description="Reporting year, defaults to the current one"),
    service: DashboardService = Depends(get_dashboard_service),
) -> DashboardStatsResponse:
    """Revenue, profit and growth for one month, plus the lifetime active-client count."""
    today = date.today()
    period = ReportingPeriod(year=year or today.year, month=month or today.month)
    period, stats = await service.get_stats(period)
    return DashboardStatsResponse(
        year=period.year,
        month=period.month,
        active_clients=stats.active_clients,
        monthly_revenue=stats.monthly_revenue,
        monthly_profit=stats.monthly_profit,
        avg_profit_percentage=stats.avg_profit_percentage,
        growth_percentage=stats.growth_percentage,
    )


@router.get("/pending-payments", response_model=list[RecordResponse])
async def get_pending_payments(
    service: DashboardService = Depends(get_dashboard_service),
) -> list[RecordResponse]:
    """Renewed records whose payment is still pending."""
    records = await service.get_pending_payments()
    return [RecordResponse.model_validate(r, from_attributes=True) for r in records]
