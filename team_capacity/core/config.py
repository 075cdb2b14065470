# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every capacity policy default.
"""

import os


class Settings:
    """Library settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "team-capacity")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    DEFAULT_WORKING_HOURS_PER_WEEK: float = float(
        os.getenv("DEFAULT_WORKING_HOURS_PER_WEEK", "40")
    )
    WORK_DAYS_PER_WEEK: int = int(os.getenv("WORK_DAYS_PER_WEEK", "5"))

    MAX_ANNUAL_VACATION_DAYS: int = int(os.getenv("MAX_ANNUAL_VACATION_DAYS", "25"))
    WARN_UTILIZATION_PCT: float = float(os.getenv("WARN_UTILIZATION_PCT", "90"))
    UPCOMING_WINDOW_DAYS: int = int(os.getenv("UPCOMING_WINDOW_DAYS", "30"))
    MAX_FUTURE_YEARS: int = int(os.getenv("MAX_FUTURE_YEARS", "10"))
    MAX_PAST_YEARS: int = int(os.getenv("MAX_PAST_YEARS", "10"))
    ALLOW_SINGLE_DAY_TIME_OFF: bool = (
        os.getenv("ALLOW_SINGLE_DAY_TIME_OFF", "false").lower() == "true"
    )


settings = Settings()
