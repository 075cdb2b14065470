# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false

"""
Tests for point-in-time and period availability calculations.
All tests run against a clock frozen on Wednesday 2024-05-15.
"""

from datetime import date

import pytest

from team_capacity.core.clock import fixed_clock
from team_capacity.core.policy import CapacityPolicy
from team_capacity.models.domain import Engagement, MemberAvailabilityData, TimeOffEntry
from team_capacity.services.availability import (
    calculate_basic_availability,
    calculate_member_availability,
    calculate_period_availability,
    calculate_vacation_days_used,
)

TODAY = date(2024, 5, 15)
CLOCK = fixed_clock(TODAY)
POLICY = CapacityPolicy()


def engagement(project="p1", hours=20, start=date(2024, 1, 1), end=None, active=True, id_=None):
    return Engagement(
        id=id_, project_id=project, hours_per_week=hours,
        start_date=start, end_date=end, is_active=active,
    )


def time_off(start, end, status="approved", type_="vacation", id_=None):
    return TimeOffEntry(id=id_, type=type_, start_date=start, end_date=end, status=status)


def member(hours=40, engagements=(), time_off_entries=()):
    return MemberAvailabilityData(
        working_hours_per_week=hours,
        engagements=list(engagements),
        time_off_entries=list(time_off_entries),
    )


def availability(data, policy=POLICY):
    return calculate_member_availability(data, clock=CLOCK, policy=policy)


# ============================================
# Member availability — engagement figures
# ============================================
class TestMemberAvailabilityHours:
    def test_single_active_engagement(self):
        result = availability(member(engagements=[engagement(hours=20)]))
        assert result.total_hours == 40
        assert result.engaged_hours == 20
        assert result.available_hours == 20
        assert result.active_engagements_count == 1
        assert result.utilization_percentage == 50.0

    def test_no_engagements(self):
        result = availability(member())
        assert result.engaged_hours == 0
        assert result.available_hours == 40
        assert result.utilization_percentage == 0

    def test_inactive_flag_excluded(self):
        result = availability(member(engagements=[engagement(active=False)]))
        assert result.engaged_hours == 0
        assert result.active_engagements_count == 0

    def test_future_engagement_excluded(self):
        result = availability(member(engagements=[engagement(start=date(2024, 6, 1))]))
        assert result.engaged_hours == 0

    def test_ended_engagement_excluded(self):
        result = availability(
            member(engagements=[engagement(start=date(2024, 1, 1), end=date(2024, 5, 14))])
        )
        assert result.engaged_hours == 0

    def test_engagement_ending_today_counts(self):
        result = availability(member(engagements=[engagement(end=TODAY)]))
        assert result.engaged_hours == 20

    def test_engagement_starting_today_counts(self):
        result = availability(member(engagements=[engagement(start=TODAY)]))
        assert result.engaged_hours == 20

    def test_overallocation_clamps_available_but_not_utilization(self):
        result = availability(
            member(engagements=[engagement(project="a", hours=30), engagement(project="b", hours=20)])
        )
        assert result.engaged_hours == 50
        assert result.available_hours == 0
        assert result.utilization_percentage == 125.0

    def test_utilization_rounded_to_two_decimals(self):
        result = availability(member(hours=7, engagements=[engagement(hours=3)]))
        assert result.utilization_percentage == 42.86

    def test_utilization_matches_ratio(self):
        result = availability(member(hours=37.5, engagements=[engagement(hours=12.5)]))
        expected = result.engaged_hours / result.total_hours * 100
        assert result.utilization_percentage == pytest.approx(expected, abs=0.005)

    def test_zero_working_hours(self):
        result = availability(member(hours=0, engagements=[engagement(hours=10)]))
        assert result.utilization_percentage == 0
        assert result.available_hours == 0

    @pytest.mark.parametrize("hours,engaged", [(40, 0), (40, 39), (40, 41), (10, 100), (0, 5)])
    def test_available_hours_never_negative(self, hours, engaged):
        result = availability(member(hours=hours, engagements=[engagement(hours=engaged)]))
        assert result.available_hours >= 0


# ============================================
# Member availability — time-off figures
# ============================================
class TestMemberAvailabilityTimeOff:
    def test_time_off_days_this_month_and_year(self):
        result = availability(member(time_off_entries=[
            time_off(date(2024, 5, 10), date(2024, 5, 20)),
            time_off(date(2024, 4, 29), date(2024, 5, 2)),
        ]))
        assert result.time_off_days_this_month == 13
        assert result.time_off_days_this_year == 15

    def test_entry_crossing_year_boundary_clamped(self):
        result = availability(member(time_off_entries=[
            time_off(date(2023, 12, 28), date(2024, 1, 3)),
        ]))
        assert result.time_off_days_this_year == 3
        assert result.time_off_days_this_month == 0

    def test_pending_and_rejected_ignored(self):
        result = availability(member(time_off_entries=[
            time_off(date(2024, 5, 10), date(2024, 5, 20), status="pending"),
            time_off(date(2024, 5, 1), date(2024, 5, 3), status="rejected"),
        ]))
        assert result.time_off_days_this_month == 0
        assert result.is_currently_on_time_off is False

    def test_currently_on_time_off_leaves_hours_untouched(self):
        data = member(
            engagements=[engagement(hours=25)],
            time_off_entries=[time_off(date(2024, 5, 14), date(2024, 5, 16))],
        )
        result = availability(data)
        assert result.is_currently_on_time_off is True
        assert result.engaged_hours == 25
        assert result.available_hours == 15

    def test_time_off_ending_today_is_current(self):
        result = availability(member(time_off_entries=[time_off(date(2024, 5, 1), TODAY)]))
        assert result.is_currently_on_time_off is True

    def test_upcoming_window_is_exclusive(self):
        entries = [
            time_off(TODAY, date(2024, 5, 16), id_="today"),
            time_off(date(2024, 5, 20), date(2024, 5, 21), id_="soon"),
            time_off(date(2024, 6, 13), date(2024, 6, 14), id_="edge-in"),
            time_off(date(2024, 6, 14), date(2024, 6, 15), id_="edge-out"),
            time_off(date(2024, 5, 22), date(2024, 5, 23), status="pending", id_="pending"),
        ]
        result = availability(member(time_off_entries=entries))
        assert [e.id for e in result.upcoming_time_off] == ["soon", "edge-in"]

    def test_upcoming_window_follows_policy(self):
        entries = [
            time_off(date(2024, 5, 20), date(2024, 5, 21), id_="soon"),
            time_off(date(2024, 5, 25), date(2024, 5, 26), id_="later"),
        ]
        result = availability(
            member(time_off_entries=entries), policy=CapacityPolicy(upcoming_window_days=7)
        )
        assert [e.id for e in result.upcoming_time_off] == ["soon"]


class TestMemberAvailabilityDeterminism:
    def test_repeated_calls_are_equal(self):
        data = member(
            engagements=[engagement(hours=15), engagement(project="p2", hours=10)],
            time_off_entries=[time_off(date(2024, 5, 20), date(2024, 5, 24))],
        )
        assert availability(data) == availability(data)

    def test_result_is_json_serializable(self):
        data = member(time_off_entries=[time_off(date(2024, 5, 20), date(2024, 5, 24))])
        payload = availability(data).model_dump(mode="json")
        assert payload["upcoming_time_off"][0]["start_date"] == "2024-05-20"
        assert payload["upcoming_time_off"][0]["type"] == "vacation"


# ============================================
# Period availability
# ============================================
class TestPeriodAvailability:
    WEEK = (date(2024, 5, 13), date(2024, 5, 17))

    def period(self, data, start=None, end=None, policy=POLICY):
        start = start or self.WEEK[0]
        end = end or self.WEEK[1]
        return calculate_period_availability(data, start, end, policy=policy)

    def test_empty_full_week(self):
        result = self.period(member())
        assert result.working_days == 5
        assert result.total_hours == 40
        assert result.engaged_hours == 0
        assert result.available_hours == 40
        assert result.time_off_days == 0
        assert result.effective_available_hours == 40

    def test_calendar_week_includes_weekend_without_extra_hours(self):
        result = self.period(member(), end=date(2024, 5, 19))
        assert result.working_days == 5
        assert result.total_hours == 40

    def test_two_weeks(self):
        result = self.period(member(), end=date(2024, 5, 26))
        assert result.working_days == 10
        assert result.total_hours == 80

    def test_engagement_covering_whole_period(self):
        result = self.period(member(engagements=[engagement(hours=20)]))
        assert result.engaged_hours == pytest.approx(20)
        assert result.available_hours == pytest.approx(20)

    def test_engagement_prorated_by_working_day_overlap(self):
        result = self.period(member(engagements=[engagement(hours=20, start=TODAY)]))
        assert result.engaged_hours == pytest.approx(12)
        assert result.available_hours == pytest.approx(28)

    def test_engagement_ending_mid_period(self):
        result = self.period(
            member(engagements=[engagement(hours=10, end=date(2024, 5, 14))])
        )
        assert result.engaged_hours == pytest.approx(4)

    def test_inactive_and_disjoint_engagements_ignored(self):
        result = self.period(member(engagements=[
            engagement(active=False),
            engagement(project="p2", start=date(2024, 6, 1)),
            engagement(project="p3", start=date(2023, 1, 1), end=date(2023, 12, 31)),
        ]))
        assert result.engaged_hours == 0

    def test_time_off_reduces_effective_hours(self):
        result = self.period(member(time_off_entries=[
            time_off(date(2024, 5, 16), date(2024, 5, 19)),
        ]))
        assert result.time_off_days == 2
        assert result.available_hours == 40
        assert result.effective_available_hours == pytest.approx(24)

    def test_pending_time_off_ignored(self):
        result = self.period(member(time_off_entries=[
            time_off(date(2024, 5, 13), date(2024, 5, 17), status="pending"),
        ]))
        assert result.time_off_days == 0
        assert result.effective_available_hours == 40

    def test_effective_hours_clamped_at_zero(self):
        result = self.period(member(
            engagements=[engagement(hours=40)],
            time_off_entries=[time_off(date(2024, 5, 13), date(2024, 5, 17))],
        ))
        assert result.effective_available_hours == 0
        assert result.available_hours == pytest.approx(0)

    def test_inverted_period_is_empty(self):
        result = self.period(
            member(engagements=[engagement()]), start=date(2024, 5, 17), end=date(2024, 5, 13)
        )
        assert result.working_days == 0
        assert result.total_hours == 0
        assert result.engaged_hours == 0
        assert result.effective_available_hours == 0

    def test_four_day_week_policy(self):
        result = self.period(member(), policy=CapacityPolicy(work_days_per_week=4))
        assert result.total_hours == pytest.approx(50)

    def test_period_echoes_dates(self):
        result = self.period(member())
        assert result.start_date == self.WEEK[0]
        assert result.end_date == self.WEEK[1]

    def test_repeated_calls_are_equal(self):
        data = member(engagements=[engagement(hours=12.5)])
        assert self.period(data) == self.period(data)


# ============================================
# Basic availability & vacation usage
# ============================================
class TestBasicAvailability:
    def test_missing_working_hours_uses_default(self):
        result = calculate_basic_availability(None, [engagement(hours=10)], clock=CLOCK)
        assert result.total_hours == 40
        assert result.available_hours == 30
        assert result.utilization_percentage == 25.0

    def test_explicit_working_hours(self):
        result = calculate_basic_availability(20, [engagement(hours=10)], clock=CLOCK)
        assert result.total_hours == 20
        assert result.utilization_percentage == 50.0

    def test_only_current_engagements(self):
        result = calculate_basic_availability(
            40,
            [engagement(hours=10), engagement(hours=10, start=date(2024, 9, 1))],
            clock=CLOCK,
        )
        assert result.engaged_hours == 10
        assert result.active_engagements_count == 1


class TestVacationDaysUsed:
    ENTRIES = [
        time_off(date(2024, 2, 1), date(2024, 2, 10)),
        time_off(date(2024, 12, 30), date(2025, 1, 2)),
        time_off(date(2024, 3, 1), date(2024, 3, 5), type_="sick_leave"),
        time_off(date(2024, 4, 1), date(2024, 4, 5), status="pending"),
    ]

    def test_explicit_year(self):
        assert calculate_vacation_days_used(self.ENTRIES, 2024) == 12
        assert calculate_vacation_days_used(self.ENTRIES, 2025) == 2

    def test_defaults_to_current_year(self):
        assert calculate_vacation_days_used(self.ENTRIES, clock=CLOCK) == 12
