# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Availability calculations — pure computation, no side effects.

Point-in-time figures (what a member is committed to this week) and
period-scoped figures (how many hours remain over a date range once
engagements and approved time-off are accounted for).
"""

from datetime import date, timedelta
from typing import Iterable, Optional

from team_capacity.core.clock import Clock, today as capture_today
from team_capacity.core.config import settings
from team_capacity.core.policy import CapacityPolicy, resolve_policy
from team_capacity.models.domain import (
    Engagement,
    MemberAvailabilityData,
    TimeOffEntry,
    TimeOffType,
)
from team_capacity.schemas.availability import (
    AvailabilityResult,
    BasicAvailability,
    PeriodAvailability,
)
from team_capacity.services.intervals import (
    clamp_overlap,
    days_in_period,
    month_bounds,
    working_days_between,
    year_bounds,
)


def is_engagement_active(engagement: Engagement, on: date) -> bool:
    """Active flag set and ``on`` inside the engagement's date range."""
    if not engagement.is_active:
        return False
    if on < engagement.start_date:
        return False
    if engagement.end_date is not None and on > engagement.end_date:
        return False
    return True


def utilization(engaged_hours: float, working_hours_per_week: float) -> float:
    """Engaged share of capacity in percent, rounded to 2 decimals. Not clamped."""
    if working_hours_per_week <= 0:
        return 0.0
    return round(engaged_hours / working_hours_per_week * 100, 2)


def approved_entries(entries: Iterable[TimeOffEntry]) -> list[TimeOffEntry]:
    return [entry for entry in entries if entry.is_approved]


def calculate_member_availability(
    data: MemberAvailabilityData,
    *,
    clock: Optional[Clock] = None,
    policy: Optional[CapacityPolicy] = None,
) -> AvailabilityResult:
    """
    Snapshot of a member's weekly commitments as of today.
    Time-off is reported alongside but never reduces the engaged hours.
    """
    policy = resolve_policy(policy)
    now = capture_today(clock)
    working = data.working_hours_per_week

    active = [e for e in data.engagements if is_engagement_active(e, now)]
    engaged_hours = sum(e.hours_per_week for e in active)

    approved = approved_entries(data.time_off_entries)
    month_start, month_end = month_bounds(now)
    year_start, year_end = year_bounds(now.year)
    horizon = now + timedelta(days=policy.upcoming_window_days)

    return AvailabilityResult(
        total_hours=working,
        engaged_hours=engaged_hours,
        available_hours=max(0.0, working - engaged_hours),
        active_engagements_count=len(active),
        utilization_percentage=utilization(engaged_hours, working),
        time_off_days_this_month=days_in_period(approved, month_start, month_end),
        time_off_days_this_year=days_in_period(approved, year_start, year_end),
        is_currently_on_time_off=any(
            entry.start_date <= now <= entry.end_date for entry in approved
        ),
        upcoming_time_off=[
            entry for entry in approved if now < entry.start_date < horizon
        ],
    )


def calculate_period_availability(
    data: MemberAvailabilityData,
    period_start: date,
    period_end: date,
    *,
    policy: Optional[CapacityPolicy] = None,
) -> PeriodAvailability:
    """
    Hours available over ``[period_start, period_end]``.

    Capacity is prorated per working day (weekly hours divided by the
    policy's work days per week). Each active engagement is charged only
    for the working days it actually covers inside the period.
    """
    policy = resolve_policy(policy)
    daily_hours = data.working_hours_per_week / policy.work_days_per_week

    working_days = working_days_between(period_start, period_end)
    total_hours = daily_hours * working_days

    engaged_hours = 0.0
    for engagement in data.engagements:
        if not engagement.is_active:
            continue
        window = clamp_overlap(
            engagement.start_date, engagement.end_date, period_start, period_end
        )
        if window is None:
            continue
        covered_days = working_days_between(window[0], window[1])
        engaged_hours += engagement.hours_per_week / policy.work_days_per_week * covered_days

    time_off_days = days_in_period(
        approved_entries(data.time_off_entries), period_start, period_end
    )
    time_off_hours = daily_hours * time_off_days

    return PeriodAvailability(
        start_date=period_start,
        end_date=period_end,
        total_hours=total_hours,
        engaged_hours=engaged_hours,
        available_hours=max(0.0, total_hours - engaged_hours),
        time_off_days=time_off_days,
        working_days=working_days,
        effective_available_hours=max(
            0.0, total_hours - engaged_hours - time_off_hours
        ),
    )


def calculate_basic_availability(
    working_hours_per_week: Optional[float],
    engagements: Iterable[Engagement],
    *,
    clock: Optional[Clock] = None,
) -> BasicAvailability:
    """Engagement-only snapshot; missing working hours use the configured default."""
    total = (
        working_hours_per_week
        if working_hours_per_week
        else settings.DEFAULT_WORKING_HOURS_PER_WEEK
    )
    now = capture_today(clock)
    active = [e for e in engagements if is_engagement_active(e, now)]
    engaged_hours = sum(e.hours_per_week for e in active)
    return BasicAvailability(
        total_hours=total,
        engaged_hours=engaged_hours,
        available_hours=max(0.0, total - engaged_hours),
        active_engagements_count=len(active),
        utilization_percentage=utilization(engaged_hours, total),
    )


def calculate_vacation_days_used(
    entries: Iterable[TimeOffEntry],
    year: Optional[int] = None,
    *,
    clock: Optional[Clock] = None,
) -> int:
    """Approved vacation days falling inside ``year`` (default: current year)."""
    if year is None:
        year = capture_today(clock).year
    vacations = [
        entry for entry in approved_entries(entries)
        if entry.type == TimeOffType.VACATION
    ]
    year_start, year_end = year_bounds(year)
    return days_in_period(vacations, year_start, year_end)
