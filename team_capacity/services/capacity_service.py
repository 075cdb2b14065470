# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Capacity facade — wires policy and clock into the pure calculators.
Coordinates calculations with logging and metrics.
"""

from datetime import date
from typing import Iterable, Optional

from team_capacity.core.clock import Clock, fixed_clock, utc_now
from team_capacity.core.logging import get_logger
from team_capacity.core.policy import CapacityPolicy
from team_capacity.metrics.prometheus import (
    AVAILABILITY_CALCULATIONS,
    CALCULATION_LATENCY,
    VALIDATION_WARNINGS,
    VALIDATIONS_TOTAL,
)
from team_capacity.models.domain import Engagement, MemberAvailabilityData, TimeOffEntry
from team_capacity.schemas.availability import (
    AvailabilityResult,
    AvailabilitySummary,
    EngagementValidationResult,
    PeriodAvailability,
    TimeOffValidationResult,
)
from team_capacity.services.availability import (
    calculate_member_availability,
    calculate_period_availability,
)
from team_capacity.services.engagements import (
    get_ending_engagements,
    get_upcoming_engagements,
)
from team_capacity.services.formatting import (
    format_availability_summary,
    get_availability_status,
)
from team_capacity.services.validation import (
    validate_engagement_capacity,
    validate_time_off_entry,
)

logger = get_logger(__name__)


class CapacityService:
    """Availability lookups and validations for one policy and clock."""

    def __init__(
        self,
        policy: Optional[CapacityPolicy] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._policy = policy or CapacityPolicy.from_settings()
        self._clock = clock or utc_now

    @property
    def policy(self) -> CapacityPolicy:
        return self._policy

    # ── Queries ──

    def member_availability(self, data: MemberAvailabilityData) -> AvailabilityResult:
        with CALCULATION_LATENCY.labels(operation="member_availability").time():
            result = calculate_member_availability(
                data, clock=self._clock, policy=self._policy
            )
        AVAILABILITY_CALCULATIONS.labels(kind="member").inc()
        if result.utilization_percentage > 100:
            logger.warning(
                "Member overallocated: engaged=%s, capacity=%s, utilization=%.2f%%",
                result.engaged_hours, result.total_hours, result.utilization_percentage,
                extra={"operation": "member_availability"},
            )
        return result

    def period_availability(
        self,
        data: MemberAvailabilityData,
        start_date: date,
        end_date: date,
    ) -> PeriodAvailability:
        with CALCULATION_LATENCY.labels(operation="period_availability").time():
            result = calculate_period_availability(
                data, start_date, end_date, policy=self._policy
            )
        AVAILABILITY_CALCULATIONS.labels(kind="period").inc()
        return result

    def availability_summary(self, data: MemberAvailabilityData) -> AvailabilitySummary:
        """Everything a profile card needs, computed against a single clock reading."""
        frozen = fixed_clock(self._clock())
        with CALCULATION_LATENCY.labels(operation="availability_summary").time():
            availability = calculate_member_availability(
                data, clock=frozen, policy=self._policy
            )
        AVAILABILITY_CALCULATIONS.labels(kind="summary").inc()
        window = self._policy.upcoming_window_days
        return AvailabilitySummary(
            availability=availability,
            status=get_availability_status(availability),
            summary=format_availability_summary(availability),
            upcoming_engagements=get_upcoming_engagements(
                data.engagements, window, clock=frozen
            ),
            ending_engagements=get_ending_engagements(
                data.engagements, window, clock=frozen
            ),
        )

    # ── Validations ──

    def validate_engagement(
        self,
        data: MemberAvailabilityData,
        candidate: Engagement,
        exclude_engagement_id: Optional[str] = None,
    ) -> EngagementValidationResult:
        with CALCULATION_LATENCY.labels(operation="validate_engagement").time():
            result = validate_engagement_capacity(
                data,
                candidate,
                exclude_engagement_id,
                clock=self._clock,
                policy=self._policy,
            )
        self._record("engagement", result.valid, result.errors, result.warnings)
        if result.conflicting_engagements:
            logger.info(
                "Engagement conflicts: project=%s, conflicting_ids=%s",
                candidate.project_id,
                [e.id for e in result.conflicting_engagements],
                extra={"kind": "engagement", "project_id": candidate.project_id},
            )
        return result

    def validate_time_off(
        self,
        entries: Iterable[TimeOffEntry],
        candidate: TimeOffEntry,
        exclude_entry_id: Optional[str] = None,
    ) -> TimeOffValidationResult:
        with CALCULATION_LATENCY.labels(operation="validate_time_off").time():
            result = validate_time_off_entry(
                entries,
                candidate,
                exclude_entry_id,
                clock=self._clock,
                policy=self._policy,
            )
        self._record("time_off", result.valid, result.errors, result.warnings)
        return result

    # ── Internal ──

    def _record(
        self, kind: str, valid: bool, errors: list[str], warnings: list[str]
    ) -> None:
        VALIDATIONS_TOTAL.labels(kind=kind, result="valid" if valid else "invalid").inc()
        if warnings:
            VALIDATION_WARNINGS.labels(kind=kind).inc(len(warnings))
            logger.warning(
                "Validation warnings: kind=%s, warnings=%s", kind, warnings,
                extra={"kind": kind},
            )
        if errors:
            logger.info(
                "Validation rejected: kind=%s, errors=%s", kind, errors,
                extra={"kind": kind},
            )
