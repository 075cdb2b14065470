# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Result schemas — immutable value objects returned by the calculators.
``model_dump(mode="json")`` gives a payload an API handler can return as-is.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from team_capacity.models.domain import Engagement, TimeOffEntry


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Availability ──

class AvailabilityResult(_Result):
    total_hours: float
    engaged_hours: float
    available_hours: float
    active_engagements_count: int
    utilization_percentage: float
    time_off_days_this_month: int
    time_off_days_this_year: int
    is_currently_on_time_off: bool
    upcoming_time_off: list[TimeOffEntry] = Field(default_factory=list)


class PeriodAvailability(_Result):
    start_date: date
    end_date: date
    total_hours: float
    engaged_hours: float
    available_hours: float
    time_off_days: int
    working_days: int
    effective_available_hours: float


class BasicAvailability(_Result):
    """Engagement-only snapshot, without any time-off figures."""

    total_hours: float
    engaged_hours: float
    available_hours: float
    active_engagements_count: int
    utilization_percentage: float


# ── Validation ──

class EngagementValidationResult(_Result):
    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    available_hours: float
    conflicting_engagements: list[Engagement] = Field(default_factory=list)


class TimeOffValidationResult(_Result):
    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    conflicting_entries: list[TimeOffEntry] = Field(default_factory=list)


class DateRangeCheck(_Result):
    valid: bool
    error: Optional[str] = None


# ── Display ──

class UtilizationLevel(_Result):
    level: str
    color: str
    label: str


class AvailabilityStatus(_Result):
    status: str
    color: str
    label: str


class AvailabilitySummary(_Result):
    """Dashboard bundle assembled by the service facade."""

    availability: AvailabilityResult
    status: AvailabilityStatus
    summary: str
    upcoming_engagements: list[Engagement] = Field(default_factory=list)
    ending_engagements: list[Engagement] = Field(default_factory=list)
