from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_bookings_service, get_ops_overview_service
from src.core.errors import NotFoundError
from src.main import create_app
from src.models.operations import BookingRecord, GuideRecord, TourRecord, VehicleRecord
from src.repositories.ops_repository import OpsSnapshot
from src.schemas.bookings import BookingDetail, BookingSummary
from src.schemas.common import Lineage
from src.schemas.ops_overview import (
    OpsOverviewResponse,
    OpsOverviewSummary,
    PeriodWindowSchema,
    RevenueMetric,
    UtilizationMetric,
)

NOW = datetime(2026, 10, 18, 15, 30)


def _build_booking(
    booking_id: str,
    tour_name: str,
    tour_date: object,
    total_amount: object = 0,
    assigned_guide: Optional[str] = None,
    assigned_vehicle: Optional[str] = None,
) -> BookingRecord:
    return BookingRecord(
        id=booking_id,
        tour_name=tour_name,
        tour_date=tour_date,
        total_amount=total_amount,
        assigned_guide=assigned_guide,
        assigned_vehicle=assigned_vehicle,
    )


class StubOpsRepository:
    source_name = "stub"

    def __init__(
        self,
        bookings: Optional[List[BookingRecord]] = None,
        tours: Optional[List[TourRecord]] = None,
        vehicles: Optional[List[VehicleRecord]] = None,
        guides: Optional[List[GuideRecord]] = None,
    ) -> None:
        self.bookings = bookings or []
        self.tours = tours or []
        self.vehicles = vehicles or []
        self.guides = guides or []

    def load_snapshot(self) -> OpsSnapshot:
        return OpsSnapshot(
            bookings=self.list_bookings(),
            tours=self.list_tours(),
            vehicles=self.list_vehicles(),
            guides=self.list_guides(),
        )

    def list_bookings(self) -> List[BookingRecord]:
        return list(self.bookings)

    def get_booking_by_id(self, booking_id: str) -> Optional[BookingRecord]:
        return next((booking for booking in self.bookings if booking.id == booking_id), None)

    def list_tours(self) -> List[TourRecord]:
        return list(self.tours)

    def list_vehicles(self) -> List[VehicleRecord]:
        return list(self.vehicles)

    def list_guides(self) -> List[GuideRecord]:
        return list(self.guides)


class FakeOpsOverviewService:
    source_name = "stub"

    def get_revenue_by_tour(self, *_: object) -> List[RevenueMetric]:
        return [
            RevenueMetric(
                tour_name="Orientation Tour", revenue=Decimal("150"), booking_count=2, load_factor=10.0
            ),
            RevenueMetric(
                tour_name="4-Wheel Drive Adventure",
                revenue=Decimal("75"),
                booking_count=1,
                load_factor=12.5,
            ),
        ]

    def get_guide_utilization(self, *_: object) -> List[UtilizationMetric]:
        return [
            UtilizationMetric(
                resource_name="Lamin Jallow",
                utilization_percent=14.285714285714285,
                total_booked_hours=8,
                available_hours=56,
            )
        ]

    def get_vehicle_utilization(self, *_: object) -> List[UtilizationMetric]:
        return [
            UtilizationMetric(
                resource_name="Unassigned",
                utilization_percent=21.428571428571427,
                total_booked_hours=12,
                available_hours=56,
            )
        ]

    def get_overview(self, period: str) -> OpsOverviewResponse:
        return OpsOverviewResponse(
            window=PeriodWindowSchema(period=period, start=datetime(2026, 10, 11, 15, 30), end=NOW),
            summary=OpsOverviewSummary(
                total_revenue=Decimal("225"),
                total_bookings=3,
                average_load_factor=11.25,
                active_tours=5,
            ),
            revenue_by_tour=self.get_revenue_by_tour(),
            guide_utilization=self.get_guide_utilization(),
            vehicle_utilization=self.get_vehicle_utilization(),
        )


class FakeBookingsService:
    source_name = "stub"

    def list_bookings(self, *_: object) -> List[BookingSummary]:
        return [
            BookingSummary(
                id="b1",
                tour_name="Orientation Tour",
                tour_date=datetime(2026, 10, 17, 8, 30),
                total_amount=Decimal("80"),
                status="confirmed",
                lineage=Lineage(source_system="stub", source_record_id="b1"),
            )
        ]

    def get_booking(self, booking_id: str) -> BookingDetail:
        if booking_id != "b1":
            raise NotFoundError("Booking not found")
        summary = self.list_bookings()[0]
        return BookingDetail(
            **summary.model_dump(),
            customer_name="Sarah Johnson",
            participants=2,
            assigned_guide="g1",
            assigned_vehicle="v1",
        )


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def make_booking():
    return _build_booking


@pytest.fixture()
def stub_repository():
    return StubOpsRepository


@pytest.fixture()
def client() -> TestClient:
    app = create_app()
    app.dependency_overrides[get_ops_overview_service] = FakeOpsOverviewService
    app.dependency_overrides[get_bookings_service] = FakeBookingsService
    return TestClient(app)
