"""Data models for Oura health data."""

from datetime import date, datetime, timedelta
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class OuraModel(BaseModel):
    """Immutable record decoded from an API response; unknown fields are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class DailySleep(OuraModel):
    """Daily sleep score and its contributors."""

    day: date
    score: Optional[int] = Field(default=None, description="Sleep score (0-100)")
    contributors: Optional[dict[str, Optional[int]]] = None


class DailyReadiness(OuraModel):
    """Daily readiness score, contributors and body temperature."""

    day: date
    score: Optional[int] = Field(default=None, description="Readiness score (0-100)")
    temperature_deviation: Optional[float] = Field(default=None, description="Deviation from baseline (°C)")
    temperature_trend_deviation: Optional[float] = Field(default=None, description="Weighted trend deviation (°C)")
    contributors: Optional[dict[str, Optional[int]]] = None


class DailyActivity(OuraModel):
    """Daily activity score, steps, calories and movement."""

    day: date
    score: Optional[int] = Field(default=None, description="Activity score (0-100)")
    active_calories: Optional[int] = None
    total_calories: Optional[int] = None
    target_calories: Optional[int] = None
    steps: Optional[int] = None
    equivalent_walking_distance: Optional[int] = Field(default=None, description="Distance in meters")
    high_activity_time: Optional[int] = Field(default=None, description="Seconds")
    medium_activity_time: Optional[int] = Field(default=None, description="Seconds")
    low_activity_time: Optional[int] = Field(default=None, description="Seconds")
    sedentary_time: Optional[int] = Field(default=None, description="Seconds")
    contributors: Optional[dict[str, Optional[int]]] = None


class DailyStress(OuraModel):
    """Daily stress summary."""

    day: date
    day_summary: Optional[str] = Field(default=None, description="'restored', 'normal' or 'stressful'")
    stress_high: Optional[int] = Field(default=None, description="Seconds in high stress")
    recovery_high: Optional[int] = Field(default=None, description="Seconds in high recovery")


class SleepPeriod(OuraModel):
    """A single sleep episode (main sleep or nap)."""

    day: date
    sleep_type: Optional[str] = Field(default=None, alias="type", description="'long_sleep' for the main sleep")
    bedtime_start: Optional[datetime] = None
    bedtime_end: Optional[datetime] = None
    total_sleep_duration: Optional[int] = Field(default=None, description="Seconds")
    time_in_bed: Optional[int] = Field(default=None, description="Seconds")
    efficiency: Optional[int] = Field(default=None, description="Percent")
    latency: Optional[int] = Field(default=None, description="Seconds to fall asleep")
    deep_sleep_duration: Optional[int] = None
    light_sleep_duration: Optional[int] = None
    rem_sleep_duration: Optional[int] = None
    awake_time: Optional[int] = None
    restless_periods: Optional[int] = None
    average_breath: Optional[float] = Field(default=None, description="Breaths per minute")
    average_heart_rate: Optional[float] = Field(default=None, description="Beats per minute")
    average_hrv: Optional[int] = Field(default=None, description="Milliseconds")
    lowest_heart_rate: Optional[int] = Field(default=None, description="Beats per minute")


RecordT = TypeVar("RecordT", bound=OuraModel)


class ApiResponse(BaseModel, Generic[RecordT]):
    """Collection envelope returned by every usercollection endpoint."""

    data: list[RecordT]


# Metric families served by /v2/usercollection/{family}
METRIC_MODELS: dict[str, type[OuraModel]] = {
    "daily_sleep": DailySleep,
    "daily_readiness": DailyReadiness,
    "daily_activity": DailyActivity,
    "daily_stress": DailyStress,
    "sleep": SleepPeriod,
}


class DateRange(BaseModel):
    """Inclusive range of calendar days. Empty when start is after end."""

    model_config = ConfigDict(frozen=True)

    start: date
    end: date

    def days(self) -> list[date]:
        """Every day in the range, ascending."""
        count = (self.end - self.start).days + 1
        return [self.start + timedelta(days=i) for i in range(max(count, 0))]

    @property
    def is_empty(self) -> bool:
        return self.start > self.end


class TrendRow(BaseModel):
    """Scores of the three score-bearing families for one day."""

    model_config = ConfigDict(frozen=True)

    day: Optional[date] = None
    sleep: Optional[int] = None
    readiness: Optional[int] = None
    activity: Optional[int] = None


class TrendTable(BaseModel):
    """Joined trend rows plus the per-family averages."""

    model_config = ConfigDict(frozen=True)

    rows: list[TrendRow] = Field(default_factory=list)
    average: TrendRow = Field(default_factory=TrendRow)
