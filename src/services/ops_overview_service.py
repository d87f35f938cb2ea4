from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from src.analytics.revenue import compute_revenue_by_tour
from src.analytics.utilization import compute_guide_utilization, compute_vehicle_utilization
from src.core.config import Settings, get_settings
from src.models.operations import TourRecord
from src.repositories.ops_repository import OpsRepository, OpsSnapshot
from src.schemas.ops_overview import (
    OpsOverviewResponse,
    OpsOverviewSummary,
    PeriodWindowSchema,
    RevenueMetric,
    UtilizationMetric,
)
from src.shared.time import PeriodWindow, resolve_period


class OpsOverviewService:
    def __init__(self, repository: OpsRepository, settings: Optional[Settings] = None) -> None:
        self.repository = repository
        self.settings = settings or get_settings()

    @property
    def source_name(self) -> str:
        return self.repository.source_name

    @staticmethod
    def _now() -> datetime:
        return datetime.now()

    def _window(self, period: str, now: Optional[datetime]) -> PeriodWindow:
        return resolve_period(period, now or self._now())

    def _snapshot(self) -> OpsSnapshot:
        return self.repository.load_snapshot()

    def _utilization_options(self) -> dict:
        return {
            "booked_hours_per_booking": self.settings.booked_hours_per_booking,
            "available_hours_per_day": self.settings.available_hours_per_day,
        }

    def get_overview(self, period: str, now: Optional[datetime] = None) -> OpsOverviewResponse:
        window = self._window(period, now)
        snapshot = self._snapshot()

        revenue_by_tour = compute_revenue_by_tour(snapshot.bookings, snapshot.tours, window)
        guide_utilization = compute_guide_utilization(
            snapshot.bookings, snapshot.guides, window, **self._utilization_options()
        )
        vehicle_utilization = compute_vehicle_utilization(
            snapshot.bookings, snapshot.vehicles, window, **self._utilization_options()
        )

        return OpsOverviewResponse(
            window=PeriodWindowSchema(period=period, start=window.start, end=window.end),
            summary=self._summarize(revenue_by_tour, snapshot.tours),
            revenue_by_tour=revenue_by_tour,
            guide_utilization=guide_utilization,
            vehicle_utilization=vehicle_utilization,
        )

    def get_revenue_by_tour(
        self, period: str, now: Optional[datetime] = None
    ) -> List[RevenueMetric]:
        window = self._window(period, now)
        snapshot = self._snapshot()
        return compute_revenue_by_tour(snapshot.bookings, snapshot.tours, window)

    def get_guide_utilization(
        self, period: str, now: Optional[datetime] = None
    ) -> List[UtilizationMetric]:
        window = self._window(period, now)
        snapshot = self._snapshot()
        return compute_guide_utilization(
            snapshot.bookings, snapshot.guides, window, **self._utilization_options()
        )

    def get_vehicle_utilization(
        self, period: str, now: Optional[datetime] = None
    ) -> List[UtilizationMetric]:
        window = self._window(period, now)
        snapshot = self._snapshot()
        return compute_vehicle_utilization(
            snapshot.bookings, snapshot.vehicles, window, **self._utilization_options()
        )

    def _summarize(
        self, revenue_by_tour: List[RevenueMetric], tours: List[TourRecord]
    ) -> OpsOverviewSummary:
        total_revenue = sum((metric.revenue for metric in revenue_by_tour), Decimal("0"))
        total_bookings = sum(metric.booking_count for metric in revenue_by_tour)
        average_load_factor = (
            sum(metric.load_factor for metric in revenue_by_tour) / len(revenue_by_tour)
            if revenue_by_tour
            else 0.0
        )
        return OpsOverviewSummary(
            total_revenue=total_revenue,
            total_bookings=total_bookings,
            average_load_factor=average_load_factor,
            active_tours=sum(1 for tour in tours if tour.status == "active"),
        )
