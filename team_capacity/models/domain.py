# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures describing a member's commitments.
Field names are snake_case; camelCase aliases accept rows from the API layer.
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Any, Iterable, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from team_capacity.core.config import settings

_DATETIME = TypeAdapter(datetime)


def _to_date(value: Any) -> Any:
    """Truncate timestamps (objects or ISO strings) to their calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10:
        return _DATETIME.validate_python(value).date()
    return value


CalendarDate = Annotated[date, BeforeValidator(_to_date)]


class TimeOffType(str, Enum):
    VACATION = "vacation"
    PARENTAL_LEAVE = "parental_leave"
    SICK_LEAVE = "sick_leave"
    PAID_TIME_OFF = "paid_time_off"
    UNPAID_TIME_OFF = "unpaid_time_off"
    OTHER = "other"


class TimeOffStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class _Record(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Engagement(_Record):
    """A member's weekly time allocation to one project."""

    id: Optional[str] = Field(default=None, description="Absent until persisted")
    project_id: str = Field(..., min_length=1, description="Project reference")
    hours_per_week: float = Field(..., ge=0, description="Allocated hours per week")
    is_active: bool = Field(default=True)
    start_date: CalendarDate
    end_date: Optional[CalendarDate] = Field(
        default=None, description="None means ongoing"
    )
    role: Optional[str] = Field(default=None, max_length=255)


class TimeOffEntry(_Record):
    """A period (end date inclusive) during which a member is unavailable."""

    id: Optional[str] = None
    type: TimeOffType
    start_date: CalendarDate
    end_date: CalendarDate
    status: TimeOffStatus = TimeOffStatus.PENDING
    description: Optional[str] = Field(default=None, max_length=1000)

    @property
    def is_approved(self) -> bool:
        return self.status == TimeOffStatus.APPROVED


class MemberAvailabilityData(_Record):
    """Everything the calculators need to know about one member."""

    working_hours_per_week: float = Field(..., ge=0)
    engagements: list[Engagement] = Field(default_factory=list)
    time_off_entries: list[TimeOffEntry] = Field(default_factory=list)
    join_date: Optional[CalendarDate] = None

    @classmethod
    def from_records(
        cls,
        working_hours_per_week: Optional[float],
        engagements: Iterable[dict[str, Any]] = (),
        time_off_entries: Iterable[dict[str, Any]] = (),
        join_date: Any = None,
    ) -> "MemberAvailabilityData":
        """
        Build the input view from raw persistence rows.
        A missing working-hours value falls back to the configured default.
        """
        if working_hours_per_week is None:
            working_hours_per_week = settings.DEFAULT_WORKING_HOURS_PER_WEEK
        return cls(
            working_hours_per_week=working_hours_per_week,
            engagements=[Engagement.model_validate(row) for row in engagements],
            time_off_entries=[
                TimeOffEntry.model_validate(row) for row in time_off_entries
            ],
            join_date=join_date,
        )
