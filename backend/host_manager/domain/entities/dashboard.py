"""Derived dashboard value objects. Never persisted."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ReportingPeriod:
    """A calendar month. ``month`` is 1-12."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @classmethod
    def current(cls) -> "ReportingPeriod":
        today = date.today()
        return cls(year=today.year, month=today.month)

    def previous(self) -> "ReportingPeriod":
        """The calendar month immediately before this one."""
        if self.month == 1:
            return ReportingPeriod(year=self.year - 1, month=12)
        return ReportingPeriod(year=self.year, month=self.month - 1)

    def contains(self, day: date | None) -> bool:
        if day is None:
            return False
        return day.year == self.year and day.month == self.month


@dataclass(frozen=True)
class DashboardStats:
    """Aggregate figures shown on the dashboard for one reporting period."""

    active_clients: int
    monthly_revenue: float
    monthly_profit: float
    avg_profit_percentage: float
    growth_percentage: float
