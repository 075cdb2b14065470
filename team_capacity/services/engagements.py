# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Engagement lifecycle helpers — status, duration, look-ahead lists.
"""

from datetime import date, timedelta
from enum import Enum
from typing import Iterable, Optional

from team_capacity.core.clock import Clock, today as capture_today
from team_capacity.core.policy import CapacityPolicy, resolve_policy
from team_capacity.models.domain import Engagement
from team_capacity.schemas.availability import DateRangeCheck
from team_capacity.services.intervals import add_years
from team_capacity.services.validation import find_conflicting_engagements


class EngagementStatus(str, Enum):
    UPCOMING = "upcoming"
    ACTIVE = "active"
    COMPLETED = "completed"
    INACTIVE = "inactive"


STATUS_COLORS: dict[EngagementStatus, str] = {
    EngagementStatus.ACTIVE: "#10B981",
    EngagementStatus.UPCOMING: "#3B82F6",
    EngagementStatus.COMPLETED: "#6B7280",
    EngagementStatus.INACTIVE: "#EF4444",
}


def get_engagement_status(
    start_date: date,
    end_date: Optional[date],
    is_active: bool,
    *,
    clock: Optional[Clock] = None,
) -> EngagementStatus:
    if not is_active:
        return EngagementStatus.INACTIVE
    now = capture_today(clock)
    if start_date > now:
        return EngagementStatus.UPCOMING
    if end_date is not None and end_date < now:
        return EngagementStatus.COMPLETED
    return EngagementStatus.ACTIVE


def get_engagement_status_color(status: EngagementStatus | str) -> str:
    try:
        return STATUS_COLORS[EngagementStatus(status)]
    except ValueError:
        return STATUS_COLORS[EngagementStatus.COMPLETED]


def calculate_engagement_duration(
    start_date: date, end_date: Optional[date]
) -> Optional[int]:
    """Days between start and end; None for an ongoing engagement."""
    if end_date is None:
        return None
    return abs((end_date - start_date).days)


def get_upcoming_engagements(
    engagements: Iterable[Engagement],
    days: int = 30,
    *,
    clock: Optional[Clock] = None,
) -> list[Engagement]:
    """Active engagements starting strictly within the next ``days`` days."""
    now = capture_today(clock)
    horizon = now + timedelta(days=days)
    return [
        e for e in engagements
        if e.is_active and now < e.start_date < horizon
    ]


def get_ending_engagements(
    engagements: Iterable[Engagement],
    days: int = 30,
    *,
    clock: Optional[Clock] = None,
) -> list[Engagement]:
    """Active engagements whose end date falls strictly within the next ``days`` days."""
    now = capture_today(clock)
    horizon = now + timedelta(days=days)
    return [
        e for e in engagements
        if e.is_active and e.end_date is not None and now < e.end_date < horizon
    ]


def has_overlapping_engagement(
    engagements: Iterable[Engagement],
    project_id: str,
    start_date: date,
    end_date: Optional[date],
    exclude_engagement_id: Optional[str] = None,
) -> bool:
    probe = Engagement(
        project_id=project_id,
        hours_per_week=0,
        start_date=start_date,
        end_date=end_date,
    )
    others = [
        e for e in engagements
        if exclude_engagement_id is None or e.id != exclude_engagement_id
    ]
    return bool(find_conflicting_engagements(others, probe))


def validate_engagement_dates(
    start_date: date,
    end_date: Optional[date],
    *,
    clock: Optional[Clock] = None,
    policy: Optional[CapacityPolicy] = None,
) -> DateRangeCheck:
    """Hard date-range checks used by create/edit forms."""
    policy = resolve_policy(policy)
    now = capture_today(clock)

    if end_date is not None and end_date <= start_date:
        return DateRangeCheck(valid=False, error="End date must be after start date")

    if start_date < add_years(now, -policy.max_past_years):
        return DateRangeCheck(
            valid=False,
            error=f"Start date cannot be more than {policy.max_past_years} years in the past",
        )

    if end_date is not None and end_date > add_years(now, policy.max_future_years):
        return DateRangeCheck(
            valid=False,
            error=f"End date cannot be more than {policy.max_future_years} years in the future",
        )

    return DateRangeCheck(valid=True)
