"""Enriched views returned to the presentation layer."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from lapmetrics.models.delta import DeltaResult
from lapmetrics.models.lap import EnrichedLapRecord, LapRecord
from lapmetrics.models.reference import MetricReference
from lapmetrics.models.stats import LapTimeStats


class DriverRaceView(BaseModel):
    """Everything the driver lap table shows for one driver in one race."""

    model_config = ConfigDict(frozen=True)

    laps: list[EnrichedLapRecord] = Field(default_factory=list)
    references: dict[str, MetricReference | None] = Field(default_factory=dict)
    lap_time_stats: LapTimeStats | None = None
    theoretical_best: float | None = None

    @property
    def driver_id(self) -> str | None:
        return self.laps[0].driver_id if self.laps else None


class FieldLapEntry(BaseModel):
    """One driver's lap compared with the best in the field on that lap."""

    model_config = ConfigDict(frozen=True)

    record: LapRecord
    deltas: dict[str, DeltaResult] = Field(default_factory=dict)


class FieldLapView(BaseModel):
    """All drivers on a single lap number with deltas to the field best."""

    model_config = ConfigDict(frozen=True)

    race_id: str | None = None
    lap_number: int | None = None
    references: dict[str, MetricReference | None] = Field(default_factory=dict)
    entries: list[FieldLapEntry] = Field(default_factory=list)
