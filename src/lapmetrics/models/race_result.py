"""Official race result model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from lapmetrics.timecodec import parse_gap_interval


class RaceResult(BaseModel):
    """Final classification row for one driver in one race.

    Gap columns are normalized from the timing sheet's ``M'SS.fff`` layout
    to ``00:MM:SS.fff``; lap deficits and blanks become None.
    """

    model_config = ConfigDict(frozen=True)

    race_id: str
    driver_id: str
    class_type: str | None = None
    position: int | None = None
    position_in_class: int | None = None
    vehicle: str | None = None
    laps: int | None = None
    elapsed_time: str | None = None
    gap_to_first: str | None = None
    gap_to_previous: str | None = None
    best_lap_number: int | None = None
    best_lap_time: str | None = None
    best_lap_speed_kph: float | None = None

    @field_validator("race_id", "driver_id", mode="before")
    @classmethod
    def _id_as_str(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("gap_to_first", "gap_to_previous", mode="before")
    @classmethod
    def _normalize_gap(cls, value: object) -> object:
        if value is None or isinstance(value, str):
            return parse_gap_interval(value)
        return value
