from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from src.schemas.common import Lineage
from src.schemas.ops_overview import Period
from src.shared.base import BaseSchema


class BookingSummary(BaseSchema):
    id: str
    tour_name: str
    tour_date: Optional[datetime] = None
    total_amount: Decimal
    status: Optional[str] = None
    lineage: Lineage


class BookingDetail(BookingSummary):
    customer_name: Optional[str] = None
    participants: Optional[int] = None
    assigned_guide: Optional[str] = None
    assigned_vehicle: Optional[str] = None


class BookingListFilters(BaseSchema):
    period: Period = "month"
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=50, ge=1, le=500)
