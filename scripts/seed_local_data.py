from __future__ import annotations

import argparse
import json
import os
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Dict, List


DEFAULT_TOURS: List[Dict[str, Any]] = [
    {"id": "1", "name": "Orientation Tour", "category": "City Tour", "status": "active", "maxCapacity": 20},
    {"id": "2", "name": "2-Day Gambia Adventure", "category": "Adventure", "status": "active", "maxCapacity": 12},
    {"id": "3", "name": "4-Wheel Drive Adventure", "category": "Adventure", "status": "active", "maxCapacity": 8},
    {"id": "4", "name": "Senegal - Fathala Wild Reserve", "category": "Wildlife", "status": "active", "maxCapacity": 10},
    {"id": "5", "name": "Sita Joyeh (Baobab Island)", "category": "Nature", "status": "active", "maxCapacity": 15},
]

DEFAULT_VEHICLES: List[Dict[str, Any]] = [
    {"id": "v1", "name": "Toyota Hiace", "type": "Minibus", "capacity": 14, "status": "available", "licensePlate": "GAM-001"},
    {"id": "v2", "name": "Mercedes Sprinter", "type": "Bus", "capacity": 20, "status": "available", "licensePlate": "GAM-002"},
]

DEFAULT_GUIDES: List[Dict[str, Any]] = [
    {"id": "g1", "name": "Lamin Jallow", "email": "lamin@aat.com", "role": "guide", "status": "active"},
    {"id": "g2", "name": "Fatou Sowe", "email": "fatou@aat.com", "role": "guide", "status": "active"},
]


def build_sample_bookings(today: date) -> List[Dict[str, Any]]:
    samples = [
        ("Orientation Tour", 0, 80, "g1", "v1"),
        ("Orientation Tour", 1, 40, "g1", "v1"),
        ("4-Wheel Drive Adventure", 2, 150, "g2", "v2"),
        ("Sita Joyeh (Baobab Island)", 5, 110, None, "v1"),
        ("2-Day Gambia Adventure", 20, 330, "g2", None),
    ]
    bookings = []
    for index, (tour_name, days_ago, amount, guide_id, vehicle_id) in enumerate(samples, start=1):
        booking: Dict[str, Any] = {
            "id": f"b{index}",
            "tourName": tour_name,
            "tourDate": (today - timedelta(days=days_ago)).isoformat(),
            "totalAmount": amount,
            "status": "confirmed",
        }
        if guide_id:
            booking["assignedGuide"] = guide_id
        if vehicle_id:
            booking["assignedVehicle"] = vehicle_id
        bookings.append(booking)
    return bookings


def store_has_data(path: Path) -> bool:
    """Report whether the store holds anything worth keeping.

    Content that is not a store object (invalid JSON, a bare list) counts as
    data so it is only replaced with --force.
    """
    if not path.exists():
        return False
    try:
        with path.open("r", encoding="utf-8") as store_file:
            payload = json.load(store_file)
    except json.JSONDecodeError:
        return True
    if not isinstance(payload, dict):
        return True
    return any(payload.get(name) for name in ("tours", "vehicles", "guides", "bookings"))


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Seed the local ops data store with the default tour catalog and sample bookings."
    )
    parser.add_argument(
        "--path",
        default=os.environ.get("OPS_LOCAL_DATA_PATH", "data/ops_store.json"),
        help="Path to the local JSON data store.",
    )
    parser.add_argument(
        "--no-bookings",
        action="store_true",
        help="Only write tours, vehicles and guides.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite a store that already has data.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    path = Path(args.path)
    if not args.force and store_has_data(path):
        print(f"Data already exists in {path}, skipping initialization (use --force to overwrite).")
        return

    payload = {
        "tours": DEFAULT_TOURS,
        "vehicles": DEFAULT_VEHICLES,
        "guides": DEFAULT_GUIDES,
        "bookings": [] if args.no_bookings else build_sample_bookings(date.today()),
    }
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as store_file:
        json.dump(payload, store_file, indent=2)
    print(
        f"Wrote {len(payload['tours'])} tours, {len(payload['vehicles'])} vehicles, "
        f"{len(payload['guides'])} guides and {len(payload['bookings'])} bookings to {path}."
    )


if __name__ == "__main__":
    main()
