"""Weather models."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class RainStatus(str, Enum):
    """Rain over a race, derived from the per-sample rain flags."""

    NO_RAIN = "No Rain"
    CONSTANT_RAIN = "Constant Rain"
    INTERMITTENT_RAIN = "Intermittent Rain"


class WeatherSample(BaseModel):
    """A single timed weather reading (~1 min cadence)."""

    model_config = ConfigDict(frozen=True)

    race_id: str | None = None
    time_utc_seconds: int | None = None
    time_utc_str: str | None = None
    air_temp: float | None = None
    track_temp: float | None = None
    humidity: float | None = None
    pressure: float | None = None
    wind_speed: float | None = None
    wind_direction: float | None = None
    rain_flag: int = 0

    @model_validator(mode="before")
    @classmethod
    def _map_rain_column(cls, data: Any) -> Any:
        if isinstance(data, Mapping) and "rain_flag" not in data and "rain" in data:
            data = {**data, "rain_flag": data["rain"]}
        return data

    @field_validator("race_id", mode="before")
    @classmethod
    def _id_as_str(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("rain_flag", mode="before")
    @classmethod
    def _missing_rain_is_dry(cls, value: object) -> object:
        return 0 if value is None else value


class WeatherSummary(BaseModel):
    """Per-race averages of every numeric weather field plus rain status."""

    model_config = ConfigDict(frozen=True)

    sample_count: int
    rain_sample_count: int
    rain_status: RainStatus
    avg_air_temp: float | None = None
    avg_track_temp: float | None = None
    avg_humidity: float | None = None
    avg_pressure: float | None = None
    avg_wind_speed: float | None = None
    avg_wind_direction: float | None = None
