"""Summary statistic models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Extremum(BaseModel):
    """Minimum or maximum of a sequence and the index where it first occurs."""

    model_config = ConfigDict(frozen=True)

    value: float
    index: int


class LapTimeStats(BaseModel):
    """Lap-time consistency figures for one driver's race."""

    model_config = ConfigDict(frozen=True)

    count: int
    mean: float
    std_dev: float
    best: Extremum
    worst: Extremum
    best_lap_number: int
    worst_lap_number: int
