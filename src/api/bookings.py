from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from src.api.dependencies import get_bookings_service
from src.schemas.bookings import BookingDetail, BookingListFilters, BookingSummary
from src.services.bookings_service import BookingsService
from src.shared.response import ResponseEnvelope, build_meta, paginate_list


router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.get("")
def list_bookings(
    filters: BookingListFilters = Depends(),
    service: BookingsService = Depends(get_bookings_service),
) -> ResponseEnvelope[List[BookingSummary]]:
    data = service.list_bookings(filters.period)
    paged_data, pagination = paginate_list(data, filters.page, filters.page_size)
    return ResponseEnvelope(
        data=paged_data,
        pagination=pagination,
        meta=build_meta(service.source_name, filters.period),
    )


@router.get("/{booking_id}")
def get_booking(
    booking_id: str,
    service: BookingsService = Depends(get_bookings_service),
) -> ResponseEnvelope[BookingDetail]:
    data = service.get_booking(booking_id)
    return ResponseEnvelope(data=data, meta=build_meta(service.source_name, "na"))
