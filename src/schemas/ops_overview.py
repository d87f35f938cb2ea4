from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Literal

from pydantic import Field

from src.shared.base import BaseSchema

Period = Literal["today", "week", "month", "quarter", "year"]


class RevenueMetric(BaseSchema):
    tour_name: str
    revenue: Decimal
    booking_count: int
    load_factor: float


class UtilizationMetric(BaseSchema):
    resource_name: str
    utilization_percent: float
    total_booked_hours: int
    available_hours: int


class OpsOverviewSummary(BaseSchema):
    total_revenue: Decimal
    total_bookings: int
    average_load_factor: float
    active_tours: int


class PeriodWindowSchema(BaseSchema):
    period: str
    start: datetime
    end: datetime


class OpsOverviewResponse(BaseSchema):
    window: PeriodWindowSchema
    summary: OpsOverviewSummary
    revenue_by_tour: List[RevenueMetric]
    guide_utilization: List[UtilizationMetric]
    vehicle_utilization: List[UtilizationMetric]


class OpsOverviewFilters(BaseSchema):
    period: Period = "month"


class OpsMetricListFilters(BaseSchema):
    period: Period = "month"
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=50, ge=1, le=500)
