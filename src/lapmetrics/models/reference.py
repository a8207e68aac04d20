"""Metric reference model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ReferenceScope(str, Enum):
    """The grouping a best value was resolved over."""

    THIS_DRIVER_THIS_RACE = "this_driver_this_race"
    ALL_DRIVERS_THIS_LAP = "all_drivers_this_lap"
    ALL_DRIVERS_THIS_RACE = "all_drivers_this_race"


class MetricReference(BaseModel):
    """The best value of a metric and the lap that set it."""

    model_config = ConfigDict(frozen=True)

    metric: str
    value: float
    owner_driver_id: str
    owner_lap_number: int
    scope: ReferenceScope | None = None
