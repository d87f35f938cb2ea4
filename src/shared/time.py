from __future__ import annotations

from calendar import monthrange
from datetime import datetime, timedelta
from typing import NamedTuple, Optional

PERIOD_TOKENS = ("today", "week", "month", "quarter", "year")


class PeriodWindow(NamedTuple):
    start: datetime
    end: datetime


def resolve_period(token: str, now: datetime) -> PeriodWindow:
    """Resolve a period token into the window ``[start, now]``.

    Aware values of ``now`` are converted to local time first, so "today"
    always starts at local midnight. Unknown tokens resolve to the empty
    window ``[now, now]`` instead of raising.
    """
    now = to_local_naive(now)
    if token == "today":
        return PeriodWindow(now.replace(hour=0, minute=0, second=0, microsecond=0), now)
    if token == "week":
        return PeriodWindow(now - timedelta(days=7), now)
    if token == "month":
        return PeriodWindow(_subtract_months(now, 1), now)
    if token == "quarter":
        return PeriodWindow(_subtract_months(now, 3), now)
    if token == "year":
        return PeriodWindow(_subtract_months(now, 12), now)
    return PeriodWindow(now, now)


def to_local_naive(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def is_within_window(value: Optional[datetime], window: PeriodWindow) -> bool:
    if value is None:
        return False
    return to_local_naive(window.start) <= to_local_naive(value) <= to_local_naive(window.end)


def window_length_days(window: PeriodWindow) -> float:
    return (window.end - window.start) / timedelta(days=1)


def _subtract_months(value: datetime, months: int) -> datetime:
    month_index = value.month - 1 - months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)
