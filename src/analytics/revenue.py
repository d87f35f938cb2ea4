from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List, Sequence

from src.models.operations import BookingRecord, TourRecord
from src.schemas.ops_overview import RevenueMetric
from src.shared.time import PeriodWindow, is_within_window


def compute_revenue_by_tour(
    bookings: Iterable[BookingRecord],
    tours: Sequence[TourRecord],
    window: PeriodWindow,
) -> List[RevenueMetric]:
    """Revenue, booking count and load factor per tour inside ``window``.

    Bookings are joined to tours by exact name. A booking whose tour name
    matches no tour is left out of every figure, so renaming a tour drops
    its earlier bookings from the report.

    Load factor counts bookings, not participants, against the tour's
    ``max_capacity``; an unknown or zero capacity yields 0.
    """
    tours_by_name: Dict[str, TourRecord] = {}
    for tour in tours:
        tours_by_name.setdefault(tour.name, tour)

    # tour_name -> [revenue, booking_count, max_capacity]
    totals: Dict[str, list] = {}
    for booking in bookings:
        if not is_within_window(booking.tour_date, window):
            continue
        tour = tours_by_name.get(booking.tour_name)
        if tour is None:
            continue
        if booking.tour_name not in totals:
            totals[booking.tour_name] = [Decimal("0"), 0, tour.max_capacity or 0]
        bucket = totals[booking.tour_name]
        bucket[0] += booking.total_amount
        bucket[1] += 1

    metrics: List[RevenueMetric] = []
    for tour_name, (revenue, booking_count, max_capacity) in totals.items():
        load_factor = (booking_count / max_capacity) * 100 if max_capacity > 0 else 0.0
        metrics.append(
            RevenueMetric(
                tour_name=tour_name,
                revenue=revenue,
                booking_count=booking_count,
                load_factor=load_factor,
            )
        )
    return sorted(metrics, key=lambda metric: metric.revenue, reverse=True)
