from __future__ import annotations

from collections import defaultdict
from math import ceil
from typing import Dict, Iterable, List, Literal, Sequence

from src.models.operations import BookingRecord, ResourceRecord
from src.schemas.ops_overview import UtilizationMetric
from src.shared.time import PeriodWindow, is_within_window, window_length_days

AssignmentField = Literal["assigned_guide", "assigned_vehicle"]

BOOKED_HOURS_PER_BOOKING = 4
AVAILABLE_HOURS_PER_DAY = 8
UNASSIGNED_KEY = "unassigned"
UNASSIGNED_LABEL = "Unassigned"


def available_hours_for(window: PeriodWindow, hours_per_day: int = AVAILABLE_HOURS_PER_DAY) -> int:
    return hours_per_day * ceil(window_length_days(window))


def compute_utilization(
    bookings: Iterable[BookingRecord],
    resources: Sequence[ResourceRecord],
    window: PeriodWindow,
    assignment_field: AssignmentField,
    *,
    booked_hours_per_booking: int = BOOKED_HOURS_PER_BOOKING,
    available_hours_per_day: int = AVAILABLE_HOURS_PER_DAY,
) -> List[UtilizationMetric]:
    """Utilization per assigned resource inside ``window``.

    Every booking counts as a fixed ``booked_hours_per_booking`` regardless
    of the tour's real duration, and every resource gets the same
    ``available_hours_per_day`` for each started day of the window.
    Bookings without an assignment are grouped under "Unassigned".
    Percentages are not capped at 100.
    """
    booked_hours: Dict[str, int] = defaultdict(int)
    for booking in bookings:
        if not is_within_window(booking.tour_date, window):
            continue
        key = getattr(booking, assignment_field) or UNASSIGNED_KEY
        booked_hours[key] += booked_hours_per_booking

    names_by_id: Dict[str, str] = {}
    for resource in resources:
        names_by_id.setdefault(resource.id, resource.name or "")

    available_hours = available_hours_for(window, available_hours_per_day)
    metrics: List[UtilizationMetric] = []
    for key, total_hours in booked_hours.items():
        utilization = (total_hours / available_hours) * 100 if available_hours > 0 else 0.0
        metrics.append(
            UtilizationMetric(
                resource_name=names_by_id.get(key) or UNASSIGNED_LABEL,
                utilization_percent=utilization,
                total_booked_hours=total_hours,
                available_hours=available_hours,
            )
        )
    return sorted(metrics, key=lambda metric: metric.utilization_percent, reverse=True)


def compute_guide_utilization(
    bookings: Iterable[BookingRecord],
    guides: Sequence[ResourceRecord],
    window: PeriodWindow,
    **kwargs: int,
) -> List[UtilizationMetric]:
    return compute_utilization(bookings, guides, window, "assigned_guide", **kwargs)


def compute_vehicle_utilization(
    bookings: Iterable[BookingRecord],
    vehicles: Sequence[ResourceRecord],
    window: PeriodWindow,
    **kwargs: int,
) -> List[UtilizationMetric]:
    return compute_utilization(bookings, vehicles, window, "assigned_vehicle", **kwargs)
