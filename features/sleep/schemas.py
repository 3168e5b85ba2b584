"""Pydantic schemas for the sleep feature.

Request models accept camelCase (as sent by the web form) or snake_case and
repair out-of-range values instead of rejecting them.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from config.sleep import (
    DEFAULT_BED_TIME,
    DEFAULT_CAFFEINE,
    DEFAULT_HEART_RATE,
    DEFAULT_MELATONIN_LEVEL,
    DEFAULT_SLEEP_HOURS,
    DEFAULT_WAKE_TIME,
)

from .normalise import (
    normalise_age,
    normalise_caffeine,
    normalise_heart_rate,
    normalise_melatonin,
    normalise_sleep_hours,
    to_number,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def _optional_time(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


class SleepMetricsInput(_CamelModel):
    """Self-reported metrics submitted for analysis."""

    melatonin_level: float = Field(
        default=DEFAULT_MELATONIN_LEVEL,
        description="Melatonin level in pg/mL, clamped to 0-100",
    )
    heart_rate: float = Field(
        default=DEFAULT_HEART_RATE,
        description="Resting heart rate in bpm, clamped to 40-120",
    )
    sleep_hours_last_night: Optional[float] = Field(
        default=None,
        description="Hours slept; derived from bed/wake time when omitted",
    )
    bed_time: Optional[str] = Field(default=DEFAULT_BED_TIME, description="HH:MM")
    wake_time: Optional[str] = Field(default=DEFAULT_WAKE_TIME, description="HH:MM")
    age: Optional[int] = Field(default=None, description="Age in whole years")
    caffeine_afternoon: str = Field(
        default=DEFAULT_CAFFEINE,
        description="Caffeine after 2pm: no, yes or sometimes",
    )

    @field_validator("melatonin_level", mode="before")
    @classmethod
    def _melatonin(cls, value: Any) -> float:
        return normalise_melatonin(value)

    @field_validator("heart_rate", mode="before")
    @classmethod
    def _heart_rate(cls, value: Any) -> float:
        return normalise_heart_rate(value)

    @field_validator("sleep_hours_last_night", mode="before")
    @classmethod
    def _sleep_hours(cls, value: Any) -> Optional[float]:
        number = to_number(value)
        if number is None or number < 0:
            return None
        return number

    @field_validator("bed_time", "wake_time", mode="before")
    @classmethod
    def _times(cls, value: Any) -> Optional[str]:
        return _optional_time(value)

    @field_validator("age", mode="before")
    @classmethod
    def _age(cls, value: Any) -> Optional[int]:
        return normalise_age(value)

    @field_validator("caffeine_afternoon", mode="before")
    @classmethod
    def _caffeine(cls, value: Any) -> str:
        return normalise_caffeine(value)


class SleepDurationRequest(_CamelModel):
    bed_time: Optional[str] = None
    wake_time: Optional[str] = None

    @field_validator("bed_time", "wake_time", mode="before")
    @classmethod
    def _times(cls, value: Any) -> Optional[str]:
        return _optional_time(value)


class SleepDurationResponse(_CamelModel):
    sleep_hours: float


class StressEstimateRequest(_CamelModel):
    """Inputs for the local stress heuristic, defaulted like the analysis path."""

    heart_rate: float = DEFAULT_HEART_RATE
    sleep_hours: float = DEFAULT_SLEEP_HOURS
    caffeine_afternoon: str = DEFAULT_CAFFEINE

    @field_validator("heart_rate", mode="before")
    @classmethod
    def _heart_rate(cls, value: Any) -> float:
        return normalise_heart_rate(value)

    @field_validator("sleep_hours", mode="before")
    @classmethod
    def _sleep_hours(cls, value: Any) -> float:
        return normalise_sleep_hours(value)

    @field_validator("caffeine_afternoon", mode="before")
    @classmethod
    def _caffeine(cls, value: Any) -> str:
        return normalise_caffeine(value)


class StressEstimateResponse(BaseModel):
    level: int = Field(..., ge=1, le=10)
    insight: str


__all__ = [
    "SleepDurationRequest",
    "SleepDurationResponse",
    "SleepMetricsInput",
    "StressEstimateRequest",
    "StressEstimateResponse",
]
