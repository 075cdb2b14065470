# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Clock injection — every calculation reads "now" exactly once through a Clock.
"""

from datetime import date, datetime, timezone
from typing import Callable, Optional

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def fixed_clock(moment: datetime | date) -> Clock:
    """Return a clock frozen at ``moment`` (a date is read as midnight UTC)."""
    if not isinstance(moment, datetime):
        moment = datetime(moment.year, moment.month, moment.day, tzinfo=timezone.utc)
    return lambda: moment


def today(clock: Optional[Clock] = None) -> date:
    """Capture the current calendar date from ``clock`` (system UTC by default)."""
    return (clock or utc_now)().date()
