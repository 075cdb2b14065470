# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Capacity policy — business thresholds injected into every calculation.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from team_capacity.core.config import settings


class CapacityPolicy(BaseModel):
    """Tunable business limits. Defaults come from environment settings."""

    model_config = ConfigDict(frozen=True)

    work_days_per_week: int = Field(default=5, ge=1, le=7)
    max_annual_vacation_days: int = Field(default=25, ge=0)
    warn_utilization_pct: float = Field(default=90.0, ge=0)
    upcoming_window_days: int = Field(default=30, ge=0)
    max_future_years: int = Field(default=10, ge=0)
    max_past_years: int = Field(default=10, ge=0)
    allow_single_day_time_off: bool = False

    @classmethod
    def from_settings(cls) -> "CapacityPolicy":
        return cls(
            work_days_per_week=settings.WORK_DAYS_PER_WEEK,
            max_annual_vacation_days=settings.MAX_ANNUAL_VACATION_DAYS,
            warn_utilization_pct=settings.WARN_UTILIZATION_PCT,
            upcoming_window_days=settings.UPCOMING_WINDOW_DAYS,
            max_future_years=settings.MAX_FUTURE_YEARS,
            max_past_years=settings.MAX_PAST_YEARS,
            allow_single_day_time_off=settings.ALLOW_SINGLE_DAY_TIME_OFF,
        )


def resolve_policy(policy: Optional[CapacityPolicy] = None) -> CapacityPolicy:
    return policy if policy is not None else CapacityPolicy.from_settings()
