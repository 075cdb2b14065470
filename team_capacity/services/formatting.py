# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Display formatting — deterministic strings and color tokens.
"""

from team_capacity.schemas.availability import (
    AvailabilityResult,
    AvailabilityStatus,
    UtilizationLevel,
)

# Ordered highest threshold first: (min percentage, level, color, label)
UTILIZATION_LEVELS: tuple[tuple[float, str, str, str], ...] = (
    (100.0, "overallocated", "#EF4444", "Overallocated"),
    (90.0, "high", "#F59E0B", "High utilization"),
    (70.0, "good", "#10B981", "Good utilization"),
    (40.0, "moderate", "#3B82F6", "Moderate utilization"),
)
LOW_LEVEL = UtilizationLevel(level="low", color="#6B7280", label="Low utilization")

ON_TIME_OFF = AvailabilityStatus(status="on_time_off", color="#8B5CF6", label="On Time-off")
OVERALLOCATED = AvailabilityStatus(status="overallocated", color="#EF4444", label="Overallocated")
BUSY = AvailabilityStatus(status="busy", color="#F59E0B", label="Busy")
AVAILABLE = AvailabilityStatus(status="available", color="#10B981", label="Available")


def format_hours(hours: float, include_unit: bool = True) -> str:
    """8 -> "8h", 8.5 -> "8.5h", 8.04 -> "8.0h"."""
    if hours == int(hours):
        text = str(int(hours))
    else:
        text = f"{hours:.1f}"
    return f"{text}h" if include_unit else text


def format_hours_per_week(hours: float) -> str:
    return f"{format_hours(hours)}/week"


def format_utilization(percentage: float) -> str:
    return f"{percentage:.1f}%"


def get_utilization_level(percentage: float) -> UtilizationLevel:
    for threshold, level, color, label in UTILIZATION_LEVELS:
        if percentage >= threshold:
            return UtilizationLevel(level=level, color=color, label=label)
    return LOW_LEVEL


def get_utilization_color(percentage: float) -> str:
    return get_utilization_level(percentage).color


def get_availability_status(availability: AvailabilityResult) -> AvailabilityStatus:
    """Time-off wins over utilization; otherwise bucket by utilization."""
    if availability.is_currently_on_time_off:
        return ON_TIME_OFF
    if availability.utilization_percentage >= 100:
        return OVERALLOCATED
    if availability.utilization_percentage >= 90:
        return BUSY
    return AVAILABLE


def format_availability_summary(availability: AvailabilityResult) -> str:
    if availability.is_currently_on_time_off:
        return "Currently on time-off"
    if availability.available_hours == 0:
        return "Fully allocated"
    if availability.utilization_percentage < 50:
        free = format_utilization(100 - availability.utilization_percentage)
        return f"{format_hours(availability.available_hours)} available ({free} free)"
    return (
        f"{format_hours(availability.available_hours)} of "
        f"{format_hours(availability.total_hours)} available"
    )
