from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from src.core.errors import NotFoundError
from src.models.operations import BookingRecord
from src.repositories.ops_repository import OpsRepository
from src.schemas.bookings import BookingDetail, BookingSummary
from src.schemas.common import Lineage
from src.shared.time import is_within_window, resolve_period


class BookingsService:
    def __init__(self, repository: OpsRepository) -> None:
        self.repository = repository

    @property
    def source_name(self) -> str:
        return self.repository.source_name

    def list_bookings(self, period: str, now: Optional[datetime] = None) -> List[BookingSummary]:
        window = resolve_period(period, now or datetime.now())
        records = [
            record
            for record in self.repository.list_bookings()
            if is_within_window(record.tour_date, window)
        ]
        records.sort(key=lambda record: record.tour_date, reverse=True)
        return [self._to_booking_summary(record) for record in records]

    def get_booking(self, booking_id: str) -> BookingDetail:
        record = self.repository.get_booking_by_id(booking_id)
        if not record:
            raise NotFoundError("Booking not found")
        return self._to_booking_detail(record)

    def _to_booking_summary(self, record: BookingRecord) -> BookingSummary:
        return BookingSummary(
            id=record.id,
            tour_name=record.tour_name,
            tour_date=record.tour_date,
            total_amount=record.total_amount,
            status=record.status,
            lineage=Lineage(source_system=self.source_name, source_record_id=record.id),
        )

    def _to_booking_detail(self, record: BookingRecord) -> BookingDetail:
        return BookingDetail(
            **self._to_booking_summary(record).model_dump(),
            customer_name=record.customer_name,
            participants=record.participants,
            assigned_guide=record.assigned_guide,
            assigned_vehicle=record.assigned_vehicle,
        )
