"""Settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .models import ACTIVITY_LEVELS, SEXES, ActivityLevel, Sex

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    default_sex: Sex = "male"
    default_activity: ActivityLevel = "moderate"


def load_settings() -> Settings:
    """Build settings from BMR_* environment variables."""
    log_level = os.environ.get("BMR_LOG_LEVEL", "INFO").strip().upper()
    sex = os.environ.get("BMR_DEFAULT_SEX", "male").strip().lower()
    activity = os.environ.get("BMR_DEFAULT_ACTIVITY", "moderate").strip().lower()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"BMR_LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")
    if sex not in SEXES:
        raise ValueError("BMR_DEFAULT_SEX must be one of: male, female")
    if activity not in ACTIVITY_LEVELS:
        raise ValueError(f"BMR_DEFAULT_ACTIVITY must be one of: {', '.join(ACTIVITY_LEVELS)}")
    return Settings(log_level=log_level, default_sex=sex, default_activity=activity)
