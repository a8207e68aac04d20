"""Lap timing models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from lapmetrics.exceptions import LapMetricsTypeError
from lapmetrics.metrics import clean_value
from lapmetrics.models.delta import DeltaResult
from lapmetrics.timecodec import to_seconds

# (field, text column, pre-parsed seconds column)
_TIMING_COLUMNS = (
    ("sector1", "s1", "s1_seconds"),
    ("sector2", "s2", "s2_seconds"),
    ("sector3", "s3", "s3_seconds"),
)

_RENAMED_COLUMNS = {
    "kph": "average_speed",
    "crossing_finish_line_in_pit": "crossed_finish_in_pit",
    "flag_at_fl": "flag_at_finish",
}


def _to_float(value: object) -> float | None:
    """Lenient float conversion for numeric columns exported as text."""
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    return clean_value(value)


def _timing(value: object) -> float | None:
    # pydantic reports ValueError as a validation error but lets TypeError escape
    try:
        return to_seconds(value)
    except LapMetricsTypeError as exc:
        raise ValueError(str(exc)) from exc


class LapRecord(BaseModel):
    """One driver's timing for one lap of one race.

    Accepts either field names or the store's column names (``s1``,
    ``s1_seconds``, ``kph``, ``flag_at_fl`` ...). Pre-parsed ``*_seconds``
    columns win over their textual counterparts when both are present.
    """

    model_config = ConfigDict(frozen=True)

    race_id: str
    driver_id: str
    lap_number: int
    lap_time: float | None = None
    sector1: float | None = None
    sector2: float | None = None
    sector3: float | None = None
    average_speed: float | None = None
    top_speed: float | None = None
    crossed_finish_in_pit: bool = False
    flag_at_finish: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _map_store_columns(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        row = dict(data)
        for field, text_column, seconds_column in _TIMING_COLUMNS:
            if field in row:
                continue
            parsed = clean_value(row.get(seconds_column))
            row[field] = parsed if parsed is not None else _timing(row.get(text_column))
        for column, field in _RENAMED_COLUMNS.items():
            if field not in row and column in row:
                row[field] = row[column]
        return row

    @field_validator("race_id", "driver_id", mode="before")
    @classmethod
    def _id_as_str(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("lap_time", "sector1", "sector2", "sector3", mode="before")
    @classmethod
    def _timing_to_seconds(cls, value: Any) -> float | None:
        return _timing(value)

    @field_validator("average_speed", "top_speed", mode="before")
    @classmethod
    def _speed_to_float(cls, value: Any) -> float | None:
        return _to_float(value)

    @field_validator("crossed_finish_in_pit", mode="before")
    @classmethod
    def _missing_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @property
    def sector_sum(self) -> float | None:
        """Sum of all three sector times, or None if any is missing."""
        s1, s2, s3 = self.sector1, self.sector2, self.sector3
        if s1 is None or s2 is None or s3 is None:
            return None
        return s1 + s2 + s3


class PreviousLapDelta(BaseModel):
    """Previous lap minus this lap, per time metric. Positive means faster."""

    model_config = ConfigDict(frozen=True)

    lap_time: float | None = None
    sector1: float | None = None
    sector2: float | None = None
    sector3: float | None = None

    @property
    def is_empty(self) -> bool:
        return all(
            v is None for v in (self.lap_time, self.sector1, self.sector2, self.sector3)
        )


class EnrichedLapRecord(LapRecord):
    """A LapRecord plus deltas to its references and to the previous lap."""

    deltas: dict[str, DeltaResult] = Field(default_factory=dict)
    previous_lap_delta: PreviousLapDelta = Field(default_factory=PreviousLapDelta)
