# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Interval arithmetic — pure computation, no side effects.

All intervals are closed ``[start, end]`` ranges of calendar dates. An end of
``None`` is unbounded. A start after its own end is an empty interval: it
overlaps nothing and contributes zero days instead of raising.
"""

from datetime import date, timedelta
from typing import Iterable, Optional

from team_capacity.models.domain import TimeOffEntry

# date.weekday(): Monday=0 ... Saturday=5, Sunday=6
_WEEKEND = (5, 6)


def _is_empty(start: date, end: Optional[date]) -> bool:
    return end is not None and start > end


def overlaps(
    start_a: date,
    end_a: Optional[date],
    start_b: date,
    end_b: Optional[date],
) -> bool:
    """Return True iff the two closed intervals share at least one day."""
    if _is_empty(start_a, end_a) or _is_empty(start_b, end_b):
        return False
    a_reaches_b = end_a is None or start_b <= end_a
    b_reaches_a = end_b is None or start_a <= end_b
    return a_reaches_b and b_reaches_a


def clamp_overlap(
    start_a: date,
    end_a: Optional[date],
    start_b: date,
    end_b: Optional[date],
) -> Optional[tuple[date, Optional[date]]]:
    """
    Intersection of two intervals, or None when they do not overlap.
    The returned end is None only if both inputs are unbounded.
    """
    if not overlaps(start_a, end_a, start_b, end_b):
        return None
    start = max(start_a, start_b)
    ends = [e for e in (end_a, end_b) if e is not None]
    return start, (min(ends) if ends else None)


def working_days_between(start: date, end: date) -> int:
    """Count Monday–Friday dates in ``[start, end]``; 0 when start > end."""
    if start > end:
        return 0
    total_days = (end - start).days + 1
    full_weeks, remainder = divmod(total_days, 7)
    first_weekday = start.weekday()
    tail = sum(
        1 for offset in range(remainder)
        if (first_weekday + offset) % 7 not in _WEEKEND
    )
    return full_weeks * 5 + tail


def calendar_days_between(start: date, end: date) -> int:
    """Inclusive calendar-day count; 0 when start > end."""
    if start > end:
        return 0
    return (end - start).days + 1


def days_in_period(
    entries: Iterable[TimeOffEntry],
    period_start: date,
    period_end: date,
) -> int:
    """Sum the inclusive calendar days each entry spends inside the period."""
    total = 0
    for entry in entries:
        window = clamp_overlap(entry.start_date, entry.end_date, period_start, period_end)
        if window is None:
            continue
        total += calendar_days_between(window[0], window[1])
    return total


# ── Calendar boundaries ──

def month_bounds(day: date) -> tuple[date, date]:
    first = day.replace(day=1)
    next_month = (first + timedelta(days=32)).replace(day=1)
    return first, next_month - timedelta(days=1)


def year_bounds(year: int) -> tuple[date, date]:
    return date(year, 1, 1), date(year, 12, 31)


def add_years(day: date, years: int) -> date:
    """Shift by whole years; Feb 29 falls back to Feb 28 in non-leap years."""
    try:
        return day.replace(year=day.year + years)
    except ValueError:
        return day.replace(year=day.year + years, day=28)
