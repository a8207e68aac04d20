"""Metric selectors: which lap field to read and which direction is better."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from lapmetrics.exceptions import LapMetricsTypeError

MetricSelector = Callable[[Any], float | None]


class Polarity(str, Enum):
    """Whether the smallest or the largest value of a metric is best."""

    MIN = "min"
    MAX = "max"


def clean_value(value: object) -> float | None:
    """Return value as a float, or None if it is missing or NaN."""
    if value is None or isinstance(value, bool):
        return None
    if not isinstance(value, (int, float)):
        return None
    value = float(value)
    return None if math.isnan(value) else value


@dataclass(frozen=True)
class Metric:
    """A named numeric lap field together with its polarity.

    Usage:
        LAP_TIME(record)   # -> 88.5 or None
        TOP_SPEED.polarity # -> Polarity.MAX
    """

    name: str
    field: str
    polarity: Polarity
    label: str = ""

    def __call__(self, record: Any) -> float | None:
        return clean_value(getattr(record, self.field, None))


LAP_TIME = Metric("lap_time", "lap_time", Polarity.MIN, "Lap Time")
SECTOR_1 = Metric("sector1", "sector1", Polarity.MIN, "Sector 1")
SECTOR_2 = Metric("sector2", "sector2", Polarity.MIN, "Sector 2")
SECTOR_3 = Metric("sector3", "sector3", Polarity.MIN, "Sector 3")
AVERAGE_SPEED = Metric("average_speed", "average_speed", Polarity.MAX, "Avg Speed")
TOP_SPEED = Metric("top_speed", "top_speed", Polarity.MAX, "Top Speed")

SECTOR_METRICS: tuple[Metric, ...] = (SECTOR_1, SECTOR_2, SECTOR_3)
TIME_METRICS: tuple[Metric, ...] = (LAP_TIME, *SECTOR_METRICS)
SPEED_METRICS: tuple[Metric, ...] = (AVERAGE_SPEED, TOP_SPEED)
TRACKED_METRICS: tuple[Metric, ...] = TIME_METRICS + SPEED_METRICS


def coerce_polarity(polarity: Polarity | str) -> Polarity:
    """Accept a Polarity or its string value ('min' / 'max')."""
    if isinstance(polarity, Polarity):
        return polarity
    if isinstance(polarity, str):
        try:
            return Polarity(polarity)
        except ValueError:
            pass
    raise LapMetricsTypeError(f"polarity must be 'min' or 'max', got {polarity!r}")
