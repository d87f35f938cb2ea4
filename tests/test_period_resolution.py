from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

import pytest

from src.shared.time import PeriodWindow, is_within_window, resolve_period, window_length_days


def test_today_starts_at_local_midnight(now):
    window = resolve_period("today", now)
    assert window == PeriodWindow(datetime(2026, 10, 18), now)


def test_week_goes_back_seven_days(now):
    window = resolve_period("week", now)
    assert window.start == datetime(2026, 10, 11, 15, 30)
    assert window.end == now
    assert window_length_days(window) == 7


@pytest.mark.parametrize(
    ("token", "expected_start"),
    [
        ("month", datetime(2026, 9, 18, 15, 30)),
        ("quarter", datetime(2026, 7, 18, 15, 30)),
        ("year", datetime(2025, 10, 18, 15, 30)),
    ],
)
def test_calendar_periods(now, token, expected_start):
    assert resolve_period(token, now) == PeriodWindow(expected_start, now)


def test_month_crosses_year_boundary():
    now = datetime(2026, 1, 15, 9, 0)
    assert resolve_period("month", now).start == datetime(2025, 12, 15, 9, 0)
    assert resolve_period("quarter", now).start == datetime(2025, 10, 15, 9, 0)


def test_month_end_clamps_to_shorter_month():
    assert resolve_period("month", datetime(2026, 3, 31, 12, 0)).start == datetime(2026, 2, 28, 12, 0)
    assert resolve_period("quarter", datetime(2026, 5, 31)).start == datetime(2026, 2, 28)
    assert resolve_period("year", datetime(2024, 2, 29)).start == datetime(2023, 2, 28)


def test_unknown_token_resolves_to_empty_window(now):
    window = resolve_period("fortnight", now)
    assert window.start == window.end == now
    assert window_length_days(window) == 0


@pytest.mark.parametrize("token", ["today", "week", "month", "quarter", "year", "", "bogus"])
def test_start_never_after_end(now, token):
    window = resolve_period(token, now)
    assert window.start <= window.end


def test_window_membership_is_inclusive(now):
    window = resolve_period("week", now)
    assert is_within_window(window.start, window)
    assert is_within_window(window.end, window)
    assert not is_within_window(window.start - timedelta(microseconds=1), window)
    assert not is_within_window(window.end + timedelta(seconds=1), window)


def test_window_membership_rejects_missing_dates(now):
    assert not is_within_window(None, resolve_period("year", now))


def test_window_membership_accepts_aware_datetimes():
    end = datetime.now(timezone.utc)
    window = resolve_period("week", end)
    local_value = (end - timedelta(days=1)).astimezone().replace(tzinfo=None)
    assert is_within_window(local_value, window)
    assert is_within_window(end - timedelta(hours=1), window)


@pytest.fixture
def new_york_local_time(monkeypatch):
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


def test_today_truncates_aware_now_in_local_time(new_york_local_time):
    now = datetime(2026, 10, 18, 2, 0, tzinfo=timezone.utc)
    window = resolve_period("today", now)
    assert window == PeriodWindow(datetime(2026, 10, 17, 0, 0), datetime(2026, 10, 17, 22, 0))
    assert is_within_window(datetime(2026, 10, 17, 9, 0), window)
    assert not is_within_window(datetime(2026, 10, 16, 23, 0), window)
