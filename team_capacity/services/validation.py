# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Capacity and conflict validation — pure computation, no side effects.

Validators never raise for business-rule failures. They return a verdict
with blocking ``errors`` and advisory ``warnings``; the caller decides what
to do with them.
"""

from typing import Iterable, Optional

from team_capacity.core.clock import Clock, today as capture_today
from team_capacity.core.policy import CapacityPolicy, resolve_policy
from team_capacity.models.domain import (
    Engagement,
    MemberAvailabilityData,
    TimeOffEntry,
    TimeOffStatus,
    TimeOffType,
)
from team_capacity.schemas.availability import (
    EngagementValidationResult,
    TimeOffValidationResult,
)
from team_capacity.services.availability import calculate_vacation_days_used
from team_capacity.services.intervals import add_years, calendar_days_between, overlaps


def _num(value: float) -> str:
    """Render 15.0 as "15" and 7.5 as "7.5" inside messages."""
    return f"{value:g}"


def find_conflicting_engagements(
    engagements: Iterable[Engagement],
    candidate: Engagement,
) -> list[Engagement]:
    """Active engagements on the candidate's project whose dates overlap it."""
    return [
        e for e in engagements
        if e.is_active
        and e.project_id == candidate.project_id
        and overlaps(e.start_date, e.end_date, candidate.start_date, candidate.end_date)
    ]


def validate_engagement_capacity(
    data: MemberAvailabilityData,
    candidate: Engagement,
    exclude_engagement_id: Optional[str] = None,
    *,
    clock: Optional[Clock] = None,
    policy: Optional[CapacityPolicy] = None,
) -> EngagementValidationResult:
    """
    Check whether ``candidate`` fits the member's remaining weekly capacity
    and does not collide with another engagement on the same project.
    Pass ``exclude_engagement_id`` when editing so the record is not
    compared against itself.
    """
    policy = resolve_policy(policy)
    now = capture_today(clock)
    errors: list[str] = []
    warnings: list[str] = []
    working = data.working_hours_per_week

    others = [
        e for e in data.engagements
        if exclude_engagement_id is None or e.id != exclude_engagement_id
    ]
    current_engaged_hours = sum(e.hours_per_week for e in others if e.is_active)
    available_hours = working - current_engaged_hours

    if candidate.hours_per_week > available_hours:
        errors.append(
            f"Engagement hours ({_num(candidate.hours_per_week)}h/week) exceed "
            f"available capacity. Available: {_num(available_hours)}h/week, "
            f"Total capacity: {_num(working)}h/week"
        )

    conflicting = find_conflicting_engagements(others, candidate)
    if conflicting:
        errors.append(
            "Member already has an active engagement on this project "
            "during the specified period"
        )

    if working > 0:
        new_utilization = (current_engaged_hours + candidate.hours_per_week) / working * 100
        if new_utilization > policy.warn_utilization_pct:
            warnings.append(
                f"This engagement will result in {new_utilization:.1f}% "
                f"utilization, which may lead to overwork"
            )

    if candidate.end_date is not None:
        if candidate.end_date <= candidate.start_date:
            errors.append("End date must be after start date")
        if candidate.end_date > add_years(now, policy.max_future_years):
            warnings.append(
                f"End date is more than {policy.max_future_years} years in the future"
            )

    return EngagementValidationResult(
        valid=not errors,
        errors=errors,
        warnings=warnings,
        available_hours=available_hours,
        conflicting_engagements=conflicting,
    )


def validate_time_off_entry(
    entries: Iterable[TimeOffEntry],
    candidate: TimeOffEntry,
    exclude_entry_id: Optional[str] = None,
    *,
    clock: Optional[Clock] = None,
    policy: Optional[CapacityPolicy] = None,
) -> TimeOffValidationResult:
    """
    Check a new or edited time-off request against the member's other entries.
    Pending entries block overlapping requests as well as approved ones.
    """
    policy = resolve_policy(policy)
    errors: list[str] = []
    warnings: list[str] = []

    others = [
        e for e in entries
        if exclude_entry_id is None or e.id != exclude_entry_id
    ]

    same_day = candidate.end_date == candidate.start_date
    if candidate.end_date < candidate.start_date or (
        same_day and not policy.allow_single_day_time_off
    ):
        errors.append("End date must be after start date")

    conflicting = [
        e for e in others
        if e.status != TimeOffStatus.REJECTED
        and overlaps(e.start_date, e.end_date, candidate.start_date, candidate.end_date)
    ]
    if conflicting:
        errors.append("Time-off period overlaps with existing time-off entries")

    if candidate.type == TimeOffType.VACATION:
        already_taken = calculate_vacation_days_used(others, clock=clock)
        requested = calendar_days_between(candidate.start_date, candidate.end_date)
        total = already_taken + requested
        if total > policy.max_annual_vacation_days:
            warnings.append(
                f"This vacation request will result in {total} vacation days "
                f"this year, which exceeds the annual allowance of "
                f"{policy.max_annual_vacation_days} days"
            )

    return TimeOffValidationResult(
        valid=not errors,
        errors=errors,
        warnings=warnings,
        conflicting_entries=conflicting,
    )
