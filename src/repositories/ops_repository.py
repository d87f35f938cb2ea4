from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, NamedTuple, Optional, Protocol

from pydantic import ValidationError

from src.core.errors import DataStoreError
from src.models.operations import BookingRecord, GuideRecord, TourRecord, VehicleRecord

logger = logging.getLogger(__name__)

COLLECTIONS = ("bookings", "tours", "vehicles", "guides")


class OpsSnapshot(NamedTuple):
    bookings: List[BookingRecord]
    tours: List[TourRecord]
    vehicles: List[VehicleRecord]
    guides: List[GuideRecord]


class OpsRepository(Protocol):
    source_name: str

    def load_snapshot(self) -> OpsSnapshot: ...

    def list_bookings(self) -> List[BookingRecord]: ...

    def get_booking_by_id(self, booking_id: str) -> Optional[BookingRecord]: ...

    def list_tours(self) -> List[TourRecord]: ...

    def list_vehicles(self) -> List[VehicleRecord]: ...

    def list_guides(self) -> List[GuideRecord]: ...


class LocalOpsRepository:
    """Reads the console's JSON data store.

    The file is a single object with one array per collection. It is read in
    full on every call so callers always see the current contents. A missing
    file reads as an empty store.
    """

    source_name = "local_store"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _load(self) -> Dict[str, List[Dict[str, Any]]]:
        if not self.path.exists():
            logger.info("Local data store %s not found; using empty collections", self.path)
            return {name: [] for name in COLLECTIONS}
        try:
            with self.path.open("r", encoding="utf-8") as store_file:
                payload = json.load(store_file)
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Failed reading local data store %s: %s", self.path, exc)
            raise DataStoreError("Local data store could not be read") from exc
        if not isinstance(payload, dict):
            raise DataStoreError("Local data store must be a JSON object")
        collections = {name: payload.get(name) or [] for name in COLLECTIONS}
        for name, rows in collections.items():
            if not isinstance(rows, list):
                raise DataStoreError(f"Local data store collection '{name}' must be a list")
        return collections

    def load_snapshot(self) -> OpsSnapshot:
        collections = self._load()
        return OpsSnapshot(
            bookings=validate_rows(BookingRecord, collections["bookings"]),
            tours=validate_rows(TourRecord, collections["tours"]),
            vehicles=validate_rows(VehicleRecord, collections["vehicles"]),
            guides=validate_rows(GuideRecord, collections["guides"]),
        )

    def list_bookings(self) -> List[BookingRecord]:
        return validate_rows(BookingRecord, self._load()["bookings"])

    def get_booking_by_id(self, booking_id: str) -> Optional[BookingRecord]:
        for booking in self.list_bookings():
            if booking.id == booking_id:
                return booking
        return None

    def list_tours(self) -> List[TourRecord]:
        return validate_rows(TourRecord, self._load()["tours"])

    def list_vehicles(self) -> List[VehicleRecord]:
        return validate_rows(VehicleRecord, self._load()["vehicles"])

    def list_guides(self) -> List[GuideRecord]:
        return validate_rows(GuideRecord, self._load()["guides"])


def validate_rows(model: Any, rows: List[Dict[str, Any]]) -> List[Any]:
    try:
        return [model.model_validate(row) for row in rows]
    except ValidationError as exc:
        logger.error("Invalid %s row in data store: %s", model.__name__, exc)
        raise DataStoreError(f"Invalid {model.__name__} row in data store") from exc
