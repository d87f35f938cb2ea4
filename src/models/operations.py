from __future__ import annotations

import logging
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Optional

from pydantic import field_validator

from src.shared.base import BaseRecord
from src.shared.time import to_local_naive

logger = logging.getLogger(__name__)


class BookingRecord(BaseRecord):
    id: str
    tour_name: str
    tour_date: Optional[datetime] = None
    total_amount: Decimal = Decimal("0")
    assigned_guide: Optional[str] = None
    assigned_vehicle: Optional[str] = None
    customer_name: Optional[str] = None
    participants: Optional[int] = None
    status: Optional[str] = None

    @field_validator("tour_date", mode="before")
    @classmethod
    def _parse_tour_date(cls, value: Any) -> Optional[datetime]:
        # Unparseable dates are kept as None so the booking never matches a period.
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime.combine(value, time.min)
        elif isinstance(value, str):
            try:
                parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
            except ValueError:
                logger.warning("Ignoring malformed tour_date %r", value)
                return None
        else:
            logger.warning("Ignoring malformed tour_date %r", value)
            return None
        return to_local_naive(parsed)


class TourRecord(BaseRecord):
    name: str
    id: Optional[str] = None
    max_capacity: Optional[int] = None
    status: Optional[str] = None
    category: Optional[str] = None


class ResourceRecord(BaseRecord):
    id: str
    name: Optional[str] = None
    status: Optional[str] = None


class GuideRecord(ResourceRecord):
    email: Optional[str] = None
    role: Optional[str] = None


class VehicleRecord(ResourceRecord):
    type: Optional[str] = None
    capacity: Optional[int] = None
    license_plate: Optional[str] = None
