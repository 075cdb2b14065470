# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Member availability and capacity engine.

Computes utilization from a member's working hours, project engagements and
time-off, and validates proposed engagements and time-off requests.
"""

from team_capacity.core.clock import Clock, fixed_clock, utc_now
from team_capacity.core.policy import CapacityPolicy
from team_capacity.models.domain import (
    Engagement,
    MemberAvailabilityData,
    TimeOffEntry,
    TimeOffStatus,
    TimeOffType,
)
from team_capacity.schemas.availability import (
    AvailabilityResult,
    AvailabilityStatus,
    AvailabilitySummary,
    BasicAvailability,
    DateRangeCheck,
    EngagementValidationResult,
    PeriodAvailability,
    TimeOffValidationResult,
    UtilizationLevel,
)
from team_capacity.services.availability import (
    calculate_basic_availability,
    calculate_member_availability,
    calculate_period_availability,
    calculate_vacation_days_used,
)
from team_capacity.services.capacity_service import CapacityService
from team_capacity.services.engagements import (
    EngagementStatus,
    calculate_engagement_duration,
    get_ending_engagements,
    get_engagement_status,
    get_engagement_status_color,
    get_upcoming_engagements,
    has_overlapping_engagement,
    validate_engagement_dates,
)
from team_capacity.services.formatting import (
    format_availability_summary,
    format_hours,
    format_hours_per_week,
    format_utilization,
    get_availability_status,
    get_utilization_color,
    get_utilization_level,
)
from team_capacity.services.intervals import (
    clamp_overlap,
    days_in_period,
    overlaps,
    working_days_between,
)
from team_capacity.services.validation import (
    validate_engagement_capacity,
    validate_time_off_entry,
)

__version__ = "1.0.0"
