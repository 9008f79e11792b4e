"""Pydantic DTOs for the dashboard endpoints."""

import math

from pydantic import BaseModel, field_serializer


class DashboardStatsResponse(BaseModel):
    """Aggregate figures for one reporting month."""

    year: int
    month: int
    active_clients: int
    monthly_revenue: float
    monthly_profit: float
    avg_profit_percentage: float
    growth_percentage: float

    @field_serializer(
        "monthly_revenue", "monthly_profit", "avg_profit_percentage", "growth_percentage",
    )
    def _finite_or_null(self, value: float) -> float | None:
        return value if math.isfinite(value) else None
