from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from src.core.errors import DataStoreError
from src.core.supabase import SupabaseClient
from src.models.operations import BookingRecord, GuideRecord, TourRecord, VehicleRecord
from src.repositories.ops_repository import OpsSnapshot, validate_rows

logger = logging.getLogger(__name__)


class SupabaseOpsRepository:
    source_name = "supabase"

    def __init__(self, client: Optional[SupabaseClient] = None) -> None:
        self.client = client or SupabaseClient()

    def _select(
        self,
        table: str,
        filters: Optional[List[Tuple[str, str]]] = None,
        limit: Optional[int] = None,
        order: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        try:
            rows = self.client.select(
                table=table, select="*", filters=filters, limit=limit, order=order
            )
        except (httpx.HTTPError, ValueError) as exc:
            logger.error("Supabase read from %s failed: %s", table, exc)
            raise DataStoreError(f"Supabase table '{table}' could not be read") from exc
        if not isinstance(rows, list):
            raise DataStoreError(f"Supabase table '{table}' returned an unexpected payload")
        return rows

    def load_snapshot(self) -> OpsSnapshot:
        return OpsSnapshot(
            bookings=self.list_bookings(),
            tours=self.list_tours(),
            vehicles=self.list_vehicles(),
            guides=self.list_guides(),
        )

    def list_bookings(self) -> List[BookingRecord]:
        return validate_rows(BookingRecord, self._select("bookings", order="tour_date.asc"))

    def get_booking_by_id(self, booking_id: str) -> Optional[BookingRecord]:
        rows = self._select("bookings", filters=[("id", f"eq.{booking_id}")], limit=1)
        if not rows:
            return None
        return validate_rows(BookingRecord, rows[:1])[0]

    def list_tours(self) -> List[TourRecord]:
        return validate_rows(TourRecord, self._select("tours"))

    def list_vehicles(self) -> List[VehicleRecord]:
        return validate_rows(VehicleRecord, self._select("vehicles"))

    def list_guides(self) -> List[GuideRecord]:
        return validate_rows(GuideRecord, self._select("guides"))
